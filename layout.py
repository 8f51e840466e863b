from __future__ import annotations
from dash import html, dcc
from config import APP_TITLE
from models import RenderMode

TOGGLE_LABELS = {
    RenderMode.CONDENSED.value: "Show Expanded View",
    RenderMode.EXPANDED.value: "Show Condensed View",
}

PANEL_STYLE = {
    "display": "none",
    "width": "33%",
    "padding": "12px",
    "border": "1px solid #e9ecef",
    "borderRadius": "8px",
    "backgroundColor": "#fcfcfd",
    "maxHeight": "90vh",
    "overflowY": "auto",
}


def serve_layout():
    return html.Div(
        [
            html.H1(APP_TITLE, style={"textAlign": "center", "color": "#333", "marginBottom": "12px"}),
            dcc.Store(id="view-mode", data=RenderMode.CONDENSED.value),
            html.Div(
                html.Button(
                    TOGGLE_LABELS[RenderMode.CONDENSED.value],
                    id="view-toggle",
                    n_clicks=0,
                    style={
                        "padding": "8px 12px",
                        "borderRadius": "8px",
                        "border": "1px solid #dee2e6",
                        "backgroundColor": "#f8f9fa",
                        "cursor": "pointer",
                        "fontWeight": 600,
                    },
                ),
                style={"marginBottom": "10px"},
            ),
            html.Div(
                [
                    dcc.Graph(id="marimekko-fig", config={"displayModeBar": False}, style={"flex": "1"}),
                    html.Div(
                        id="detail-panel",
                        role="region",
                        **{"aria-label": "Vegetation details"},
                        style=PANEL_STYLE,
                        children=[
                            html.Div(
                                "×",
                                id="panel-close",
                                n_clicks=0,
                                title="Close",
                                style={"float": "right", "cursor": "pointer", "fontSize": "20px", "color": "#666"},
                            ),
                            html.Div(id="detail-panel-body"),
                        ],
                    ),
                ],
                style={"display": "flex", "gap": "16px", "alignItems": "flex-start"},
            ),
            html.Div(
                "Tip: Hover a segment for details, click it to compare against the fire average.",
                style={"textAlign": "center", "color": "#666"},
            ),
        ],
        style={"maxWidth": "1400px", "margin": "0 auto"},
    )
