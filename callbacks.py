from __future__ import annotations

import logging
from typing import Any, List, Optional

import dash
from dash import dcc, html, Input, Output, State, callback
from plotly.graph_objects import Figure

from config import DEF_CSV
from data_loader import load_records
from figures.marimekko_figure import make_marimekko
from figures.severity_figure import make_fire_comparison, make_severity_distribution
from geometry import build_chart, compute_columns
from layout import TOGGLE_LABELS
from models import RenderMode
from utils import check_consistency, fire_average_distribution, find_record

logger = logging.getLogger(__name__)

# Load once per process; the column layout does not depend on the mode
_records = load_records(DEF_CSV)
_columns = compute_columns(_records)
_averages = fire_average_distribution(_records)
check_consistency(_records)

# ---------- Helpers ----------

def next_mode(mode: Optional[str]) -> str:
    current = RenderMode(mode or RenderMode.CONDENSED.value)
    return (RenderMode.CONDENSED if current == RenderMode.EXPANDED else RenderMode.EXPANDED).value


def chart_figure(mode: Optional[str]) -> Figure:
    chart = build_chart(_records, RenderMode(mode or RenderMode.CONDENSED.value), columns=_columns)
    return make_marimekko(chart)


def clicked_name(click_data: Optional[dict]) -> Optional[str]:
    if not click_data or not click_data.get("points"):
        return None
    custom = click_data["points"][0].get("customdata")
    if not custom:
        return None
    return str(custom[0])


def panel_children(name: str) -> List[Any]:
    record = find_record(_records, name)
    if record is None:
        return [html.Div("No data available for this vegetation type.", className="panel-text")]
    return [
        html.H2(record.name, className="panel-heading", style={"fontSize": "22px"}),
        html.P(["This vegetation represents ", html.Strong(f"{record.total_percent:.1f}%"), " of the total burn area"]),
        html.P(["Total species area affected: ", html.Strong(f"{record.total_hectares:.1f}"), " hectares"]),
        html.Hr(style={"border": "none", "height": "2px", "backgroundColor": "#333", "marginTop": "25px"}),
        dcc.Graph(figure=make_severity_distribution(record), config={"displayModeBar": False}),
        dcc.Graph(figure=make_fire_comparison(record, _averages), config={"displayModeBar": False}),
    ]

# ---------- Mode toggle ----------

@callback(
    Output("view-mode", "data"),
    Output("view-toggle", "children"),
    Input("view-toggle", "n_clicks"),
    State("view-mode", "data"),
    prevent_initial_call=True,
)
def toggle_mode(n_clicks, mode):
    new_mode = next_mode(mode)
    return new_mode, TOGGLE_LABELS[new_mode]

# ---------- Redraw on mode change ----------

@callback(Output("marimekko-fig", "figure"), Input("view-mode", "data"))
def update_chart(mode):
    try:
        mode = RenderMode(mode or RenderMode.CONDENSED.value).value
    except ValueError:
        logger.warning("Unknown view mode %r, falling back to condensed", mode)
        mode = RenderMode.CONDENSED.value
    return chart_figure(mode)

# ---------- Click → detail panel ----------

@callback(
    Output("detail-panel", "style"),
    Output("detail-panel-body", "children"),
    Input("marimekko-fig", "clickData"),
    Input("panel-close", "n_clicks"),
    State("detail-panel", "style"),
    prevent_initial_call=True,
)
def toggle_panel(click_data, close_clicks, current_style):
    current_style = dict(current_style or {})

    ctx = dash.callback_context
    trigger_id = ctx.triggered[0]["prop_id"].split(".")[0] if ctx.triggered else None

    if trigger_id == "panel-close":
        current_style["display"] = "none"
        return current_style, []

    name = clicked_name(click_data)
    if name is None:
        return dash.no_update, dash.no_update

    current_style["display"] = "block"
    return current_style, panel_children(name)
