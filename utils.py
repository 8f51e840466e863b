import logging
from typing import Any, Dict, List, Optional, Sequence

from config import CONSISTENCY_TOLERANCE, ROW_SEVERITIES
from models import SEVERITY_ORDER, Severity, VegetationRecord

logger = logging.getLogger(__name__)


def total_fire_hectares(records: Sequence[VegetationRecord]) -> float:
    return sum(r.total_hectares for r in records)


def percent_of_total_fire(records: Sequence[VegetationRecord], severity: Severity) -> float:
    """Share of the whole fire's area burned at `severity`, from hectare sums."""
    total = total_fire_hectares(records)
    if total == 0:
        return 0.0
    return sum(r.hectares(severity) for r in records) / total * 100


def fire_average_distribution(records: Sequence[VegetationRecord]) -> Dict[Severity, float]:
    return {s: percent_of_total_fire(records, s) for s in SEVERITY_ORDER}


def record_summary(record: VegetationRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "total_percent": record.total_percent,
        "total_hectares": record.total_hectares,
        "severity": [
            {"severity": s.value, "percent": record.percent(s), "hectares": record.hectares(s)}
            for s in ROW_SEVERITIES
        ],
    }


def comparison_rows(record: VegetationRecord, averages: Dict[Severity, float]) -> List[Dict[str, Any]]:
    return [{"severity": s.value, "veg": record.percent(s), "avg": averages.get(s, 0.0)} for s in ROW_SEVERITIES]


def find_record(records: Sequence[VegetationRecord], name: str) -> Optional[VegetationRecord]:
    for r in records:
        if r.name == name:
            return r
    return None


def describe_segment(severity: Optional[Severity]) -> str:
    if severity is None:
        return "of total burn area"
    return f"of species burn area considered {severity.value.lower()} severity"


def check_consistency(
    records: Sequence[VegetationRecord],
    tolerance: float = CONSISTENCY_TOLERANCE,
) -> List[str]:
    """Report dataset invariant violations without altering anything.

    Records carrying no severity data at all are not flagged for their
    percent sum; they render as empty columns.
    """
    issues: List[str] = []
    for r in records:
        local = r.local_total
        if local > 0 and abs(local - 100) > tolerance:
            issues.append(f"{r.name}: severity percents sum to {local:.2f}, expected 100")
        ha_sum = sum(r.severity_hectares)
        if ha_sum > 0 and abs(ha_sum - r.total_hectares) > tolerance:
            issues.append(f"{r.name}: severity hectares sum to {ha_sum:.2f}, total_ha is {r.total_hectares:.2f}")

    if records:
        pct_total = sum(r.total_percent for r in records)
        if abs(pct_total - 100) > tolerance:
            issues.append(f"total_percent sums to {pct_total:.2f}, expected 100")
        if total_fire_hectares(records) > 0:
            avg_total = sum(fire_average_distribution(records).values())
            if abs(avg_total - 100) > tolerance:
                issues.append(f"fire-wide severity averages sum to {avg_total:.2f}, expected 100")

    for issue in issues:
        logger.warning("Consistency: %s", issue)
    return issues
