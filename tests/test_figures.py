import plotly.graph_objects as go
import pytest

from figures.marimekko_figure import make_marimekko
from figures.severity_figure import make_fire_comparison, make_severity_distribution
from geometry import build_chart
from models import RenderMode
from utils import fire_average_distribution


def _annotation_texts(fig):
    return [a.text for a in fig.layout.annotations]


def test_condensed_figure(scenario_records):
    fig = make_marimekko(build_chart(scenario_records, RenderMode.CONDENSED))
    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == ["A", "B"]
    texts = _annotation_texts(fig)
    assert {"Total", "High", "Moderate", "Low", "Unburned"} <= set(texts)
    assert "46.0%" in texts
    assert "0.7 - 1" in texts
    assert len(fig.layout.shapes) == 5


def test_condensed_bars_match_geometry(scenario_records):
    chart = build_chart(scenario_records, RenderMode.CONDENSED)
    fig = make_marimekko(chart)
    a = fig.data[0]
    # Total row plus one active piece in each of the four severity rows
    assert len(a.x) == 5
    assert a.width[0] == pytest.approx(chart.rows[0].segments[0].width)
    assert a.customdata[0][0] == "A"
    assert a.customdata[0][3] == "of total burn area"


def test_expanded_figure_splits_faded_segments(scenario_records):
    fig = make_marimekko(build_chart(scenario_records, RenderMode.EXPANDED))
    assert len(fig.data) == 4
    faded = [t for t in fig.data if t.hoverinfo == "skip"]
    assert len(faded) == 2
    assert all(not t.showlegend for t in faded)
    assert all(set(t.marker.opacity) == {0.3} for t in faded)
    assert "46.0%" not in _annotation_texts(fig)


def test_empty_chart_figure():
    fig = make_marimekko(build_chart([], RenderMode.CONDENSED))
    assert len(fig.data) == 0
    assert _annotation_texts(fig) == ["No vegetation data available"]


def test_severity_distribution_figure(scenario_records):
    fig = make_severity_distribution(scenario_records[0])
    bar = fig.data[0]
    assert list(bar.x) == ["High", "Moderate", "Low", "Unburned"]
    assert list(bar.y) == [70.0, 20.0, 10.0, 0.0]
    assert bar.text[0] == "70.0%"


def test_fire_comparison_figure(scenario_records):
    fig = make_fire_comparison(scenario_records[1], fire_average_distribution(scenario_records))
    veg, avg = fig.data
    assert veg.name == "B"
    assert avg.name == "Fire average"
    assert avg.y[0] == pytest.approx(46.0)
    assert fig.layout.barmode == "group"
