from __future__ import annotations
import plotly.graph_objects as go
from typing import Dict, List, Tuple
from config import LABEL_MARGIN, SUMMARY_OFFSET
from models import ChartGeometry, RenderMode, Segment
from utils import describe_segment

HOVER_TEMPLATE = (
    "<b>%{customdata[0]}</b><br>"
    "%{customdata[1]:.1f}% %{customdata[3]}<br>"
    "%{customdata[2]:.1f} hectares burned<extra></extra>"
)


def _customdata(seg: Segment) -> list:
    return [seg.name, seg.percent, seg.hectares, describe_segment(seg.severity), seg.row]


def _bar(segments: List[Segment], name: str, color: str, row_y: Dict[str, Tuple[float, float]], hoverable: bool, showlegend: bool) -> go.Bar:
    return go.Bar(
        x=[s.x for s in segments],
        width=[s.width for s in segments],
        offset=0,
        base=[row_y[s.row][0] for s in segments],
        y=[row_y[s.row][1] for s in segments],
        name=name,
        legendgroup=name,
        showlegend=showlegend,
        marker=dict(color=color, opacity=[s.opacity for s in segments], line=dict(width=0)),
        customdata=[_customdata(s) for s in segments],
        hovertemplate=HOVER_TEMPLATE if hoverable else None,
        hoverinfo=None if hoverable else "skip",
    )


def make_marimekko(chart: ChartGeometry, title_text: str | None = None) -> go.Figure:
    if not chart.columns:
        return go.Figure().add_annotation(
            text="No vegetation data available", xref="paper", yref="paper", x=0.5, y=0.5, showarrow=False
        )

    row_y = {row.label: (row.y, row.height) for row in chart.rows}

    # Group rectangles per vegetation so the legend lists each type once.
    active: Dict[str, List[Segment]] = {}
    inactive: Dict[str, List[Segment]] = {}
    colors: Dict[str, str] = {}
    for row in chart.rows:
        for seg in row.segments:
            colors.setdefault(seg.name, seg.color)
            (active if seg.is_active else inactive).setdefault(seg.name, []).append(seg)

    traces = []
    for name, color in colors.items():
        if name in active:
            traces.append(_bar(active[name], name, color, row_y, hoverable=True, showlegend=True))
        if name in inactive:
            # Faded sub-segments of the expanded view: no hover, no click
            traces.append(_bar(inactive[name], name, color, row_y, hoverable=False, showlegend=False))

    fig = go.Figure(data=traces)

    for row in chart.rows:
        mid = row.y + row.height / 2
        fig.add_annotation(
            x=-LABEL_MARGIN * 0.8, y=mid, text=row.label, showarrow=False, xanchor="left",
            font=dict(size=14, color="#333"),
        )
        if row.threshold:
            fig.add_annotation(
                x=-LABEL_MARGIN * 0.8, y=mid, yshift=-20, text=row.threshold, showarrow=False, xanchor="left",
                font=dict(size=11, color="#666"),
            )
        if chart.mode == RenderMode.CONDENSED and row.summary_percent is not None:
            fig.add_annotation(
                x=chart.width - SUMMARY_OFFSET, y=mid, text=f"{row.summary_percent:.1f}%", showarrow=False,
                xanchor="right", font=dict(size=14, color="#333"),
            )

    severity_rows = [row for row in chart.rows if row.severity is not None]
    if severity_rows:
        edges = [severity_rows[0].y] + [row.y + row.height for row in severity_rows]
        for y in edges:
            fig.add_shape(
                type="line", x0=-LABEL_MARGIN, x1=chart.total_width, y0=y, y1=y,
                line=dict(color="black", width=1),
            )

    fig.update_xaxes(visible=False, range=[-LABEL_MARGIN, chart.total_width])
    fig.update_yaxes(visible=False, range=[chart.height, 0])

    fig.update_layout(
        title=dict(text=title_text or "Fire severity by vegetation type", x=0.5, xanchor="center"),
        barmode="overlay",
        bargap=0,
        plot_bgcolor="white",
        legend=dict(orientation="h", yanchor="top", y=-0.05, x=0.0, title=dict(text="Vegetation:")),
        margin=dict(l=10, r=10, t=50, b=120),
        height=720,
    )
    return fig
