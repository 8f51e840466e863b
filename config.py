# config.py
from __future__ import annotations

import os
from pathlib import Path

from models import Severity

# =========================
# App meta
# =========================
APP_TITLE = "Vegetation Fire Impact"
LOG_LEVEL = os.environ.get("MARIMEKKO_LOG_LEVEL", "INFO")

# =========================
# Chart geometry (pixels)
# =========================
CHART_WIDTH = 1000.0
ROW_HEIGHT = 200.0
TOTAL_ROW_SPACING = 60.0   # extra space below the Total row
COLUMN_GAP = 1.0           # between vegetation columns, never inside one
LABEL_MARGIN = 100.0       # room for row labels left of the chart
SUMMARY_OFFSET = 60.0      # summary label inset from the right edge

TOTAL_LABEL = "Total"
# Top-to-bottom row order (stacking order inside a column is separate)
ROW_SEVERITIES = [Severity.HIGH, Severity.MODERATE, Severity.LOW, Severity.UNBURNED]

# dNBR ranges shown under each row label
SEVERITY_THRESHOLDS = {
    Severity.HIGH: "0.7 - 1",
    Severity.MODERATE: "0.4 - 0.7",
    Severity.LOW: "0 - 0.3",
    Severity.UNBURNED: "<0",
}

ACTIVE_OPACITY = 1.0
INACTIVE_OPACITY = 0.3

# =========================
# Detail panel
# =========================
VEG_BAR_COLOR = "#2c7bb6"
AVG_BAR_COLOR = "#bdbdbd"
DEFAULT_PANEL_COLOR = "#999999"

# =========================
# Input schemas
# =========================
NAME_FIELDS = ("vegetation_classification", "species")
COLOR_FIELD = "color"
TOTAL_PERCENT_FIELD = "total_percent"
TOTAL_HA_FIELD = "total_ha"

# severity -> (percent field, hectare field); absent severities default to 0
FOUR_BAND_FIELDS = {
    Severity.HIGH: ("high_percent", "high_ha"),
    Severity.MODERATE: ("moderate_percent", "moderate_ha"),
    Severity.LOW: ("low_percent", "low_ha"),
    Severity.UNBURNED: ("unburned_percent", "unburned_ha"),
}
THREE_BAND_FIELDS = {
    Severity.HIGH: ("high_percent", "high_ha"),
    Severity.MODERATE: ("medium_percent", "medium_ha"),
    Severity.LOW: ("low_percent", "low_ha"),
}
FOUR_BAND_MARKERS = ("moderate_percent", "unburned_percent")
THREE_BAND_MARKERS = ("medium_percent",)

# Allowed drift for percent sums (100) and hectare sums (total_ha)
CONSISTENCY_TOLERANCE = 0.5

# =========================
# Paths
# =========================
ROOT = Path(__file__).resolve().parent
DEF_CSV = Path(os.environ.get("MARIMEKKO_CSV", ROOT / "data" / "veg_fire_matrix_eureka.csv"))
