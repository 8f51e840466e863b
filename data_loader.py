import logging
import math
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from config import (
    COLOR_FIELD,
    FOUR_BAND_FIELDS,
    FOUR_BAND_MARKERS,
    NAME_FIELDS,
    THREE_BAND_FIELDS,
    THREE_BAND_MARKERS,
    TOTAL_HA_FIELD,
    TOTAL_PERCENT_FIELD,
)
from models import SEVERITY_ORDER, VegetationRecord

logger = logging.getLogger(__name__)


class MalformedRecord(ValueError):
    """A row lacks (or duplicates) an identifying field; the whole load fails."""

    def __init__(self, row_index: int, field: str, reason: str = "missing"):
        self.row_index = row_index
        self.field = field
        self.reason = reason
        super().__init__(f"Row {row_index}: {reason} required field '{field}'")


class SchemaMismatch(ValueError):
    """The table header matches neither (or both) of the supported schemas."""


class Schema(str, Enum):
    FOUR_BAND = "four-band"
    THREE_BAND = "three-band"


SCHEMA_FIELDS = {
    Schema.FOUR_BAND: FOUR_BAND_FIELDS,
    Schema.THREE_BAND: THREE_BAND_FIELDS,
}


def _is_blank(x: Any) -> bool:
    if x is None:
        return True
    if isinstance(x, float) and math.isnan(x):
        return True
    return str(x).strip() == ""


def _to_float(x: Any) -> float:
    """Coerce a cell to float; blanks and junk become 0.0."""
    if _is_blank(x):
        return 0.0
    try:
        value = float(str(x).strip())
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def detect_schema(columns: Iterable[str]) -> Schema:
    cols = {str(c).strip() for c in columns}
    four = any(m in cols for m in FOUR_BAND_MARKERS)
    three = any(m in cols for m in THREE_BAND_MARKERS)
    if four and three:
        raise SchemaMismatch(f"Mixed three-band and four-band columns: {sorted(cols)}")
    if four:
        return Schema.FOUR_BAND
    if three:
        return Schema.THREE_BAND
    raise SchemaMismatch(f"No recognised severity columns. Available={sorted(cols)}")


def _name_field(columns: Iterable[str]) -> str:
    cols = {str(c).strip() for c in columns}
    for n in NAME_FIELDS:
        if n in cols:
            return n
    return NAME_FIELDS[0]


def _numeric(row: Mapping[str, Any], key: Optional[str], row_index: int) -> float:
    if key is None:
        return 0.0
    value = _to_float(row.get(key))
    if value < 0:
        logger.warning("Row %d: negative %s=%s coerced to 0", row_index, key, value)
        return 0.0
    return value


def normalize_records(
    rows: Sequence[Mapping[str, Any]],
    columns: Optional[Iterable[str]] = None,
) -> List[VegetationRecord]:
    """Turn raw table rows into VegetationRecords, preserving row order.

    The schema is decided once from `columns` (or the first row's keys).
    Raises SchemaMismatch or MalformedRecord; nothing is returned on failure.
    """
    rows = [{str(k).strip(): v for k, v in row.items()} for row in rows]
    if columns is None:
        if not rows:
            return []
        columns = list(rows[0].keys())
    columns = [str(c).strip() for c in columns]

    schema = detect_schema(columns)
    fields = SCHEMA_FIELDS[schema]
    name_key = _name_field(columns)
    logger.info("Detected %s schema (%d rows)", schema.value, len(rows))

    records: List[VegetationRecord] = []
    seen: Dict[str, int] = {}
    for i, row in enumerate(rows):
        raw_name = row.get(name_key)
        if _is_blank(raw_name):
            raise MalformedRecord(i, name_key)
        raw_color = row.get(COLOR_FIELD)
        if _is_blank(raw_color):
            raise MalformedRecord(i, COLOR_FIELD)

        name = str(raw_name).strip()
        if name in seen:
            raise MalformedRecord(i, name_key, reason=f"duplicate (first at row {seen[name]})")
        seen[name] = i

        percents: List[float] = []
        hectares: List[float] = []
        for severity in SEVERITY_ORDER:
            pct_key, ha_key = fields.get(severity, (None, None))
            percents.append(_numeric(row, pct_key, i))
            hectares.append(_numeric(row, ha_key, i))

        records.append(
            VegetationRecord(
                name=name,
                total_percent=_numeric(row, TOTAL_PERCENT_FIELD, i),
                severity_percent=_as_tuple(percents),
                total_hectares=_numeric(row, TOTAL_HA_FIELD, i),
                severity_hectares=_as_tuple(hectares),
                color=str(raw_color).strip(),
            )
        )
    return records


def _as_tuple(values: List[float]) -> Tuple[float, float, float, float]:
    return (values[0], values[1], values[2], values[3])


def load_records(csv_path: Path) -> List[VegetationRecord]:
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Vegetation table not found: {csv_path}")
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)
    records = normalize_records(df.to_dict(orient="records"), columns=list(df.columns))
    logger.info("Loaded %d vegetation records from %s", len(records), csv_path)
    return records


def records_frame(records: Sequence[VegetationRecord]) -> pd.DataFrame:
    """Flat DataFrame view of the records (one column per severity value)."""
    out = []
    for r in records:
        row = {"name": r.name, "total_percent": r.total_percent, "total_ha": r.total_hectares, "color": r.color}
        for severity in SEVERITY_ORDER:
            key = severity.value.lower()
            row[f"{key}_percent"] = r.percent(severity)
            row[f"{key}_ha"] = r.hectares(severity)
        out.append(row)
    return pd.DataFrame(out, columns=_frame_columns())


def _frame_columns() -> List[str]:
    cols = ["name", "total_percent", "total_ha", "color"]
    for severity in SEVERITY_ORDER:
        key = severity.value.lower()
        cols += [f"{key}_percent", f"{key}_ha"]
    return cols

