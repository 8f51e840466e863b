from __future__ import annotations
import plotly.graph_objects as go
from typing import Dict
from config import AVG_BAR_COLOR, DEFAULT_PANEL_COLOR, VEG_BAR_COLOR
from models import Severity, VegetationRecord
from utils import comparison_rows, record_summary


def make_severity_distribution(record: VegetationRecord) -> go.Figure:
    rows = record_summary(record)["severity"]
    labels = [r["severity"] for r in rows]
    values = [r["percent"] for r in rows]

    fig = go.Figure(
        data=[
            go.Bar(
                x=labels,
                y=values,
                marker=dict(color=record.color or DEFAULT_PANEL_COLOR),
                text=[f"{v:.1f}%" for v in values],
                textposition="outside",
                customdata=[r["hectares"] for r in rows],
                hovertemplate="%{x}: %{y:.1f}%<br>%{customdata:.1f} ha<extra></extra>",
            )
        ]
    )
    fig.update_yaxes(visible=False, range=[0, max(values + [1.0]) * 1.2])
    fig.update_layout(
        title=dict(text="Species Severity Distribution", x=0.5, xanchor="center"),
        margin=dict(l=10, r=10, t=40, b=30),
        height=220,
        bargap=0.2,
        plot_bgcolor="white",
    )
    return fig


def make_fire_comparison(record: VegetationRecord, averages: Dict[Severity, float]) -> go.Figure:
    rows = comparison_rows(record, averages)
    labels = [r["severity"] for r in rows]
    veg = [r["veg"] for r in rows]
    avg = [r["avg"] for r in rows]

    fig = go.Figure(
        data=[
            go.Bar(
                x=labels, y=veg, name=record.name,
                marker=dict(color=VEG_BAR_COLOR),
                text=[f"{v:.1f}%" for v in veg], textposition="outside",
            ),
            go.Bar(
                x=labels, y=avg, name="Fire average",
                marker=dict(color=AVG_BAR_COLOR),
                text=[f"{v:.1f}%" for v in avg], textposition="outside",
            ),
        ]
    )
    fig.update_yaxes(visible=False, range=[0, max(veg + avg + [1.0]) * 1.2])
    fig.update_layout(
        title=dict(text="Vegetation vs. Fire Average", x=0.5, xanchor="center"),
        barmode="group",
        bargap=0.1,
        bargroupgap=0.05,
        legend=dict(orientation="h", yanchor="top", y=-0.15, x=0.0),
        margin=dict(l=10, r=10, t=40, b=60),
        height=260,
        plot_bgcolor="white",
    )
    return fig
