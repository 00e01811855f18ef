from __future__ import annotations

import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

pytest.importorskip("pandas")
pytest.importorskip("streamlit")

from dashboard.components.controls import chart_type_label
from dashboard.components.preview import preview_frame, preview_summary, remaining_caption
from engine.models import ChartKind, Table


def _table(count):
    return Table.from_records(["id", "value"], [{"id": str(i), "value": str(i * 10)} for i in range(count)])


def test_preview_shows_first_rows_and_counts_the_rest():
    frame, remaining = preview_frame(_table(14), limit=10)

    assert len(frame) == 10
    assert list(frame.columns) == ["id", "value"]
    assert remaining == 4
    assert remaining_caption(remaining) == "... and 4 more rows"


def test_short_tables_have_no_footer():
    frame, remaining = preview_frame(_table(3), limit=10)
    assert len(frame) == 3
    assert remaining == 0
    assert remaining_caption(remaining) is None


def test_summary_line():
    assert preview_summary(_table(2)) == "2 rows × 2 columns"


def test_duplicate_columns_are_shown_once():
    table = Table.from_records(["a", "a"], [{"a": "2"}])
    frame, _ = preview_frame(table)
    assert list(frame.columns) == ["a"]
    assert frame.iloc[0]["a"] == "2"


def test_chart_type_label_marks_recommendation():
    assert chart_type_label(ChartKind.LINE, ChartKind.LINE) == "Line Chart (Recommended)"
    assert chart_type_label(ChartKind.PIE, ChartKind.LINE) == "Pie Chart"
