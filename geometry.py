"""
Marimekko geometry
==================

Pure functions turning normalized VegetationRecords into rectangles.

- `compute_columns` splits the horizontal axis into one fractional column per
  record, proportional to `total_percent`. It runs once per dataset and every
  row reuses the result, which keeps the severity rows aligned with Total.
- `partition_column` cuts one column width into the four severity
  sub-segments (Unburned, Low, Moderate, High, always in that order).
- `project_row` / `total_row` place those pieces for one chart row.
- `build_chart` assembles all rows for a given render mode.

Pixel constants (width, gap, row heights) are parameters; the config values
are only defaults.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from config import (
    ACTIVE_OPACITY,
    CHART_WIDTH,
    COLUMN_GAP,
    INACTIVE_OPACITY,
    ROW_HEIGHT,
    ROW_SEVERITIES,
    SEVERITY_THRESHOLDS,
    TOTAL_LABEL,
    TOTAL_ROW_SPACING,
)
from models import (
    SEVERITY_ORDER,
    ChartGeometry,
    Column,
    RenderMode,
    RowGeometry,
    Segment,
    Severity,
    SubSegment,
    VegetationRecord,
)
from utils import percent_of_total_fire


def _running_totals(values: Sequence[float]) -> List[float]:
    # Prefixes and grand total come from the same += chain, never from sum().
    totals = [0.0]
    for v in values:
        totals.append(totals[-1] + v)
    return totals


def compute_columns(records: Sequence[VegetationRecord]) -> List[Column]:
    # The last prefix is the category total itself, so the last
    # end_fraction is category_total / category_total == 1.0 exactly.
    running = _running_totals([r.total_percent for r in records])
    category_total = running[-1]
    columns: List[Column] = []
    for i, r in enumerate(records):
        if category_total == 0:
            columns.append(Column(index=i, name=r.name, start_fraction=0.0, end_fraction=0.0))
            continue
        columns.append(
            Column(
                index=i,
                name=r.name,
                start_fraction=running[i] / category_total,
                end_fraction=running[i + 1] / category_total,
            )
        )
    return columns


def partition_column(
    record: VegetationRecord,
    width: float,
    active: Optional[Severity] = None,
) -> List[SubSegment]:
    """Split `width` among the record's four severity values.

    Widths come from differences of cumulative offsets, so the last offset is
    exactly `width`. A record without any severity data yields four
    zero-width pieces.
    """
    cum = _running_totals(record.severity_percent)
    local_total = cum[-1]
    offsets = [(c / local_total) * width if local_total > 0 else 0.0 for c in cum]

    return [
        SubSegment(
            severity=severity,
            percent=record.percent(severity),
            hectares=record.hectares(severity),
            is_active=severity == active,
            offset=offsets[k],
            width=offsets[k + 1] - offsets[k],
        )
        for k, severity in enumerate(SEVERITY_ORDER)
    ]


def column_x(column: Column, width: float, gap: float) -> float:
    return column.start_fraction * width + column.index * gap


def total_row(
    records: Sequence[VegetationRecord],
    columns: Sequence[Column],
    width: float = CHART_WIDTH,
    gap: float = COLUMN_GAP,
    y: float = 0.0,
    height: float = ROW_HEIGHT,
) -> RowGeometry:
    row = RowGeometry(label=TOTAL_LABEL, severity=None, y=y, height=height)
    for col, r in zip(columns, records):
        row.segments.append(
            Segment(
                column_index=col.index,
                name=r.name,
                row=TOTAL_LABEL,
                severity=None,
                x=column_x(col, width, gap),
                width=col.fraction * width,
                color=r.color,
                opacity=ACTIVE_OPACITY,
                is_active=True,
                percent=r.total_percent,
                hectares=r.total_hectares,
            )
        )
    return row


def project_row(
    records: Sequence[VegetationRecord],
    columns: Sequence[Column],
    severity: Severity,
    mode: RenderMode,
    width: float = CHART_WIDTH,
    gap: float = COLUMN_GAP,
    y: float = 0.0,
    height: float = ROW_HEIGHT,
) -> RowGeometry:
    """Place one severity row.

    Expanded: all four sub-segments per column, fused, at the column's x.
    Condensed: only the active sub-segment per column, packed left to right
    with `gap` between columns; zero-width actives stay in the sequence.
    """
    row = RowGeometry(
        label=severity.value,
        severity=severity,
        y=y,
        height=height,
        threshold=SEVERITY_THRESHOLDS.get(severity),
    )
    x = 0.0
    for col, r in zip(columns, records):
        parts = partition_column(r, col.fraction * width, active=severity)
        if mode == RenderMode.EXPANDED:
            left = column_x(col, width, gap)
            row.segments.extend(_segment(col, r, severity, p, left + p.offset) for p in parts)
        else:
            active = next(p for p in parts if p.is_active)
            row.segments.append(_segment(col, r, severity, active, x))
            x += active.width + gap

    if mode == RenderMode.CONDENSED:
        row.summary_percent = percent_of_total_fire(records, severity)
    return row


def _segment(col: Column, record: VegetationRecord, row_severity: Severity, part: SubSegment, x: float) -> Segment:
    return Segment(
        column_index=col.index,
        name=record.name,
        row=row_severity.value,
        severity=part.severity,
        x=x,
        width=part.width,
        color=record.color,
        opacity=ACTIVE_OPACITY if part.is_active else INACTIVE_OPACITY,
        is_active=part.is_active,
        percent=part.percent,
        hectares=part.hectares,
    )


def build_chart(
    records: Sequence[VegetationRecord],
    mode: RenderMode,
    width: float = CHART_WIDTH,
    gap: float = COLUMN_GAP,
    row_height: float = ROW_HEIGHT,
    total_spacing: float = TOTAL_ROW_SPACING,
    columns: Optional[Sequence[Column]] = None,
) -> ChartGeometry:
    """Full chart for `mode`. Pass `columns` to reuse an earlier layout."""
    mode = RenderMode(mode)
    if columns is None:
        columns = compute_columns(records)
    columns = list(columns)

    rows = [total_row(records, columns, width, gap, y=0.0, height=row_height)]
    y = row_height + total_spacing
    for severity in ROW_SEVERITIES:
        rows.append(project_row(records, columns, severity, mode, width, gap, y=y, height=row_height))
        y += row_height

    total_width = width + max(len(columns) - 1, 0) * gap
    return ChartGeometry(mode=mode, width=width, total_width=total_width, height=y, columns=columns, rows=rows)
