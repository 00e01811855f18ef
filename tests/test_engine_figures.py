from __future__ import annotations

import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

pytest.importorskip("pandas")
pytest.importorskip("plotly")

from engine.figures import build_figure
from engine.models import ChartKind, ChartRequest, Table
from engine.transformer import PALETTE, transform


@pytest.fixture
def table():
    columns = ["region", "revenue", "cost", "units"]
    rows = [
        ("North", "120", "80", "12"),
        ("South", "90", "70", "9"),
        ("East", "60", "50", "4"),
    ]
    return Table.from_records(columns, [dict(zip(columns, row)) for row in rows])


def _figure(table, kind, **kwargs):
    request = ChartRequest(kind=kind, x_field="region", y_field="revenue")
    return build_figure(transform(table, request), request, **kwargs)


@pytest.mark.parametrize(
    ("kind", "trace_types"),
    [
        (ChartKind.BAR, ["bar"]),
        (ChartKind.LINE, ["scatter"]),
        (ChartKind.SCATTER, ["scatter"]),
        (ChartKind.AREA, ["scatter"]),
        (ChartKind.PIE, ["pie"]),
        (ChartKind.DONUT, ["pie"]),
        (ChartKind.FUNNEL, ["funnel"]),
        (ChartKind.TREEMAP, ["treemap"]),
        (ChartKind.COMPOSED, ["bar", "scatter"]),
        (ChartKind.RADIAL_BAR, ["barpolar"]),
        (ChartKind.RADAR, ["scatterpolar", "scatterpolar", "scatterpolar"]),
    ],
)
def test_each_kind_maps_to_plotly_traces(table, kind, trace_types):
    fig = _figure(table, kind)
    assert [trace.type for trace in fig.data] == trace_types


def test_pie_and_donut_use_palette_colors(table):
    pie = _figure(table, ChartKind.PIE)
    donut = _figure(table, ChartKind.DONUT)

    assert list(pie.data[0].marker.colors) == list(PALETTE[:3])
    assert pie.data[0].hole == 0
    assert donut.data[0].hole == pytest.approx(0.4)


def test_radar_traces_are_named_after_numeric_columns(table):
    fig = _figure(table, ChartKind.RADAR)
    assert [trace.name for trace in fig.data] == ["revenue", "cost", "units"]


def test_bar_values_are_coerced(table):
    fig = _figure(table, ChartKind.BAR)
    assert list(fig.data[0].y) == [120.0, 90.0, 60.0]


def test_legend_and_grid_toggles(table):
    fig = _figure(table, ChartKind.BAR, show_legend=False, show_grid=False)

    assert fig.layout.showlegend is False
    assert fig.layout.xaxis.showgrid is False
    assert fig.layout.yaxis.showgrid is False


def test_layout_overrides_are_applied(table):
    fig = _figure(table, ChartKind.LINE, layout={"title": {"text": "Revenue"}})
    assert fig.layout.title.text == "Revenue"


def test_empty_dataset_still_builds(table):
    request = ChartRequest(kind=ChartKind.BAR, x_field="region", y_field="revenue")
    fig = build_figure(transform(Table.empty(), request), request)
    assert len(fig.data) == 1
