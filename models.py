from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Severity(str, Enum):
    """Burn-severity bands, declared in stacking order (lowest severity first)."""
    UNBURNED = "Unburned"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


# Order of sub-segments inside a column and of the per-severity tuples below.
SEVERITY_ORDER: Tuple[Severity, ...] = tuple(Severity)


class RenderMode(str, Enum):
    CONDENSED = "condensed"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class VegetationRecord:
    """One vegetation classification from the input table.

    `severity_percent` and `severity_hectares` are indexed by SEVERITY_ORDER.
    """
    name: str
    total_percent: float
    severity_percent: Tuple[float, float, float, float]
    total_hectares: float
    severity_hectares: Tuple[float, float, float, float]
    color: str

    def percent(self, severity: Severity) -> float:
        return self.severity_percent[SEVERITY_ORDER.index(severity)]

    def hectares(self, severity: Severity) -> float:
        return self.severity_hectares[SEVERITY_ORDER.index(severity)]

    @property
    def local_total(self) -> float:
        return sum(self.severity_percent)


@dataclass(frozen=True)
class Column:
    index: int
    name: str
    start_fraction: float
    end_fraction: float

    @property
    def fraction(self) -> float:
        return self.end_fraction - self.start_fraction


@dataclass(frozen=True)
class SubSegment:
    severity: Severity
    percent: float
    hectares: float
    is_active: bool
    # offset and width share the unit of the column width they were cut from
    offset: float
    width: float


@dataclass(frozen=True)
class Segment:
    """A single rectangle handed to the renderer, in absolute x units."""
    column_index: int
    name: str
    row: str
    severity: Optional[Severity]
    x: float
    width: float
    color: str
    opacity: float
    is_active: bool
    percent: float
    hectares: float


@dataclass
class RowGeometry:
    label: str
    severity: Optional[Severity]
    y: float
    height: float
    segments: List[Segment] = field(default_factory=list)
    summary_percent: Optional[float] = None
    threshold: Optional[str] = None


@dataclass
class ChartGeometry:
    mode: RenderMode
    width: float
    total_width: float
    height: float
    columns: List[Column]
    rows: List[RowGeometry]
