"""Chart type catalogue, recommendation heuristic and display strings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .models import ChartKind


@dataclass(frozen=True)
class ChartTypeInfo:
    kind: ChartKind
    name: str
    description: str
    recommended_for: Tuple[str, ...] = ()


CHART_CATALOG: Tuple[ChartTypeInfo, ...] = (
    ChartTypeInfo(ChartKind.BAR, "Bar Chart", "Compare values across categories", ("categorical", "numerical")),
    ChartTypeInfo(ChartKind.LINE, "Line Chart", "Show trends over time", ("time", "numerical")),
    ChartTypeInfo(ChartKind.PIE, "Pie Chart", "Show proportions of a whole", ("categorical", "percentage")),
    ChartTypeInfo(
        ChartKind.SCATTER, "Scatter Plot", "Explore relationships between variables", ("numerical", "correlation")
    ),
    ChartTypeInfo(ChartKind.AREA, "Area Chart", "Show trends with filled areas", ("time", "cumulative")),
    ChartTypeInfo(
        ChartKind.DONUT,
        "Donut Chart",
        "Pie chart with center space for additional info",
        ("categorical", "percentage"),
    ),
    ChartTypeInfo(
        ChartKind.RADAR,
        "Radar Chart",
        "Compare multiple variables in a circular format",
        ("multivariate", "comparison"),
    ),
    ChartTypeInfo(ChartKind.FUNNEL, "Funnel Chart", "Show progressive reduction of data", ("process", "conversion")),
    ChartTypeInfo(
        ChartKind.TREEMAP,
        "Treemap",
        "Display hierarchical data as nested rectangles",
        ("hierarchical", "proportional"),
    ),
    ChartTypeInfo(
        ChartKind.COMPOSED, "Composed Chart", "Combine multiple chart types in one view", ("mixed", "comparison")
    ),
    ChartTypeInfo(
        ChartKind.RADIAL_BAR, "Radial Bar", "Circular bar chart for progress or comparison", ("progress", "circular")
    ),
)

_BY_KIND: Dict[ChartKind, ChartTypeInfo] = {info.kind: info for info in CHART_CATALOG}

TIME_HINTS = ("date", "time", "year")
NUMERIC_HINTS = ("amount", "value", "price", "count")

_NOTICES = {
    ChartKind.RADAR: (
        "Radar Chart Info:",
        "Shows multiple numeric variables for comparison. Using first 5 rows and up to 3 numeric columns.",
    ),
    ChartKind.TREEMAP: (
        "Treemap Info:",
        "Displays hierarchical data as nested rectangles. Rectangle size represents the data value.",
    ),
}


def chart_info(kind: ChartKind | str) -> ChartTypeInfo:
    return _BY_KIND[ChartKind(kind)]


def recommend_chart_kind(columns: Sequence[str]) -> ChartKind:
    """Suggest a chart kind from column names alone.

    Any date/time/year column suggests a line chart; two or more columns that
    look like measures suggest a scatter plot; otherwise a bar chart.
    """

    lowered = [str(name).lower() for name in columns]
    if any(hint in name for name in lowered for hint in TIME_HINTS):
        return ChartKind.LINE
    measures = [name for name in lowered if any(hint in name for hint in NUMERIC_HINTS)]
    if len(measures) >= 2:
        return ChartKind.SCATTER
    return ChartKind.BAR


def display_name(kind: ChartKind | str) -> str:
    kind = ChartKind(kind)
    if kind is ChartKind.DONUT:
        return "Donut"
    if kind is ChartKind.RADIAL_BAR:
        return "Radial Bar"
    return kind.value[:1].upper() + kind.value[1:]


def chart_caption(kind: ChartKind | str, x_field: str, y_field: str) -> str:
    return f"{display_name(kind)} chart showing {y_field} by {x_field}"


def chart_notice(kind: ChartKind | str) -> Optional[Tuple[str, str]]:
    """Return a ``(title, body)`` info notice for kinds that reshape the data."""

    return _NOTICES.get(ChartKind(kind))


def default_axes(columns: Sequence[str]) -> Tuple[str, str]:
    """Pick the first column for x and the second (or first) for y."""

    if not columns:
        return "", ""
    x_field = columns[0]
    y_field = columns[1] if len(columns) > 1 and columns[1] else columns[0]
    return x_field, y_field


__all__ = [
    "CHART_CATALOG",
    "ChartTypeInfo",
    "chart_caption",
    "chart_info",
    "chart_notice",
    "default_axes",
    "display_name",
    "recommend_chart_kind",
]
