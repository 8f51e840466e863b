#!/usr/bin/env python3

import logging
import pandas as pd
from config import DEF_CSV, ROW_SEVERITIES
from data_loader import load_records, records_frame
from utils import check_consistency, fire_average_distribution, total_fire_hectares

def summarize_fire():
    records = load_records(DEF_CSV)
    df = records_frame(records)

    print("Vegetation Fire Severity Summary")
    print("=" * 50)
    print(f"Vegetation types: {len(records):,}")
    print(f"Total burned area: {total_fire_hectares(records):,.1f} ha")
    print()

    print("Per-vegetation severity (% of vegetation area)")
    print("-" * 50)
    pct_cols = [f"{s.value.lower()}_percent" for s in ROW_SEVERITIES]
    with pd.option_context("display.max_colwidth", 40, "display.width", 120):
        print(df.set_index("name")[["total_percent"] + pct_cols].round(1))
    print()

    print("Fire-wide severity (% of total fire area)")
    print("-" * 50)
    averages = fire_average_distribution(records)
    for s in ROW_SEVERITIES:
        print(f"{s.value}: {averages[s]:.1f}%")
    print()

    issues = check_consistency(records)
    if issues:
        print("Consistency issues:")
        for issue in issues:
            print(f"  - {issue}")
    else:
        print("No consistency issues found.")

if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    summarize_fire()
