import pytest

from config import DEF_CSV
from data_loader import (
    MalformedRecord,
    Schema,
    SchemaMismatch,
    detect_schema,
    load_records,
    normalize_records,
    records_frame,
)
from models import SEVERITY_ORDER, Severity
from conftest import four_band_row


def test_four_band_rows_are_coerced_in_order(scenario_records):
    assert [r.name for r in scenario_records] == ["A", "B"]
    a = scenario_records[0]
    assert a.total_percent == 60.0
    assert a.total_hectares == 600.0
    assert a.percent(Severity.HIGH) == 70.0
    assert a.hectares(Severity.HIGH) == pytest.approx(420.0)
    assert a.percent(Severity.UNBURNED) == 0.0
    assert a.color == "#1b5e20"


def test_severity_tuples_follow_stacking_order(scenario_records):
    b = scenario_records[1]
    assert b.severity_percent == tuple(b.percent(s) for s in SEVERITY_ORDER)
    assert b.severity_percent == (70.0, 10.0, 10.0, 10.0)


def test_three_band_schema_maps_medium_and_defaults_unburned(three_band_rows):
    records = normalize_records(three_band_rows)
    chaparral, grass = records
    assert chaparral.name == "Chaparral"
    assert chaparral.percent(Severity.MODERATE) == 30.0
    assert chaparral.hectares(Severity.MODERATE) == 225.0
    assert chaparral.percent(Severity.UNBURNED) == 0.0
    assert chaparral.hectares(Severity.UNBURNED) == 0.0
    # blank cells fall back to 0
    assert grass.percent(Severity.HIGH) == 0.0


def test_detect_schema():
    assert detect_schema(["vegetation_classification", "moderate_percent"]) == Schema.FOUR_BAND
    assert detect_schema(["species", "medium_percent"]) == Schema.THREE_BAND


def test_mixed_schema_is_rejected():
    with pytest.raises(SchemaMismatch):
        detect_schema(["moderate_percent", "medium_percent"])


def test_unrecognised_schema_is_rejected():
    rows = [{"vegetation_classification": "A", "color": "#000", "total_percent": "100"}]
    with pytest.raises(SchemaMismatch):
        normalize_records(rows)


def test_missing_color_fails_whole_load(scenario_rows):
    del scenario_rows[1]["color"]
    with pytest.raises(MalformedRecord) as excinfo:
        normalize_records(scenario_rows)
    assert excinfo.value.row_index == 1
    assert excinfo.value.field == "color"


def test_blank_name_fails_whole_load(scenario_rows):
    scenario_rows[0]["vegetation_classification"] = "   "
    with pytest.raises(MalformedRecord) as excinfo:
        normalize_records(scenario_rows)
    assert excinfo.value.row_index == 0
    assert excinfo.value.field == "vegetation_classification"


def test_duplicate_name_is_malformed(scenario_rows):
    scenario_rows.append(four_band_row("A", 0, 0, 0, 0, 0, 0))
    with pytest.raises(MalformedRecord) as excinfo:
        normalize_records(scenario_rows)
    assert excinfo.value.row_index == 2


def test_bad_numbers_fall_back_to_zero(scenario_rows):
    scenario_rows[0]["high_percent"] = "n/a"
    scenario_rows[0]["low_ha"] = "inf"
    scenario_rows[0]["total_ha"] = "-5"
    del scenario_rows[0]["moderate_ha"]
    a = normalize_records(scenario_rows)[0]
    assert a.percent(Severity.HIGH) == 0.0
    assert a.hectares(Severity.LOW) == 0.0
    assert a.hectares(Severity.MODERATE) == 0.0
    assert a.total_hectares == 0.0


def test_empty_input():
    assert normalize_records([]) == []
    assert normalize_records([], columns=["vegetation_classification", "moderate_percent", "color"]) == []


def test_load_records_from_csv(tmp_path, scenario_rows):
    header = list(scenario_rows[0].keys())
    lines = [",".join(header)] + [",".join(row[h] for h in header) for row in scenario_rows]
    path = tmp_path / "veg.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    records = load_records(path)
    assert [r.name for r in records] == ["A", "B"]
    assert records[1].percent(Severity.UNBURNED) == 70.0


def test_load_records_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(tmp_path / "nope.csv")


def test_bundled_table_loads():
    records = load_records(DEF_CSV)
    assert len(records) > 0
    assert sum(r.total_percent for r in records) == pytest.approx(100.0)


def test_records_frame(scenario_records):
    df = records_frame(scenario_records)
    assert list(df["name"]) == ["A", "B"]
    assert df.loc[1, "unburned_percent"] == 70.0
    assert {"high_ha", "moderate_ha", "low_ha", "unburned_ha"} <= set(df.columns)
