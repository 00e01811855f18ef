"""Chart type and axis selectors."""

from __future__ import annotations

from typing import Sequence, Tuple

import streamlit as st

from engine.catalog import CHART_CATALOG, chart_info, recommend_chart_kind
from engine.models import ChartKind


def chart_type_label(kind: ChartKind, recommended: ChartKind) -> str:
    label = chart_info(kind).name
    if kind is recommended:
        label += " (Recommended)"
    return label


def render_chart_type_selector(selected: ChartKind, columns: Sequence[str]) -> ChartKind:
    """Render the chart type picker and return the chosen kind."""

    recommended = recommend_chart_kind(columns)
    kinds = [info.kind for info in CHART_CATALOG]
    choice = st.radio(
        "Select Chart Type",
        kinds,
        index=kinds.index(ChartKind(selected)),
        format_func=lambda kind: chart_type_label(kind, recommended),
        horizontal=True,
    )
    st.caption(chart_info(choice).description)
    return ChartKind(choice)


def _index_of(options: Sequence[str], value: str) -> int:
    try:
        return list(options).index(value)
    except ValueError:
        return 0


def render_axis_selector(columns: Sequence[str], x_field: str, y_field: str) -> Tuple[str, str]:
    """Render the X/Y column pickers and return the selected pair."""

    options = list(dict.fromkeys(columns))
    if not options:
        return "", ""
    x_col, y_col = st.columns(2)
    with x_col:
        x_choice = st.selectbox("X-Axis (Categories)", options, index=_index_of(options, x_field))
    with y_col:
        y_choice = st.selectbox("Y-Axis (Values)", options, index=_index_of(options, y_field))
    return str(x_choice), str(y_choice)


__all__ = ["chart_type_label", "render_axis_selector", "render_chart_type_selector"]
