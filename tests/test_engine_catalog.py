from __future__ import annotations

import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

pytest.importorskip("pandas")

from engine.catalog import (
    CHART_CATALOG,
    chart_caption,
    chart_info,
    chart_notice,
    default_axes,
    display_name,
    recommend_chart_kind,
)
from engine.models import ChartKind


def test_catalog_lists_every_kind_once_in_display_order():
    kinds = [info.kind for info in CHART_CATALOG]
    assert kinds == list(ChartKind)
    assert chart_info("radialBar").name == "Radial Bar"


@pytest.mark.parametrize(
    ("columns", "expected"),
    [
        (["Order Date", "amount"], ChartKind.LINE),
        (["YEAR", "total"], ChartKind.LINE),
        (["unit_price", "item_count", "city"], ChartKind.SCATTER),
        (["amount", "city"], ChartKind.BAR),
        ([], ChartKind.BAR),
    ],
)
def test_recommend_chart_kind(columns, expected):
    assert recommend_chart_kind(columns) is expected


def test_default_axes():
    assert default_axes(["month", "sales", "cost"]) == ("month", "sales")
    assert default_axes(["only"]) == ("only", "only")
    assert default_axes(["first", ""]) == ("first", "first")
    assert default_axes([]) == ("", "")


def test_display_strings():
    assert display_name(ChartKind.DONUT) == "Donut"
    assert display_name(ChartKind.RADIAL_BAR) == "Radial Bar"
    assert chart_caption(ChartKind.BAR, "month", "sales") == "Bar chart showing sales by month"


def test_notices_only_for_reshaping_kinds():
    title, body = chart_notice(ChartKind.RADAR)
    assert title == "Radar Chart Info:"
    assert "first 5 rows" in body
    assert chart_notice(ChartKind.TREEMAP) is not None
    assert chart_notice(ChartKind.BAR) is None


def test_unknown_kind_lists_valid_values():
    with pytest.raises(ValueError, match="radialBar"):
        ChartKind.from_value("histogram")
