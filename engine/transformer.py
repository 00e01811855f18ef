"""Reshape a generic :class:`Table` into the records each chart kind expects."""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from .coercion import coerce_numeric, is_numeric
from .models import ChartDataset, ChartKind, ChartRequest, Record, Table

PALETTE: Tuple[str, ...] = (
    "#3B82F6",
    "#14B8A6",
    "#F97316",
    "#EF4444",
    "#8B5CF6",
    "#10B981",
    "#F59E0B",
    "#EC4899",
)
EXTENDED_PALETTE: Tuple[str, ...] = PALETTE + (
    "#06B6D4",
    "#84CC16",
    "#F43F5E",
    "#8B5A2B",
    "#6366F1",
    "#D946EF",
    "#0EA5E9",
    "#22C55E",
)

RADAR_ROW_LIMIT = 5
RADAR_SERIES_LIMIT = 3
RADIAL_BAR_ROW_LIMIT = 6


def palette_color(index: int, palette: Sequence[str] = PALETTE) -> str:
    """Cycle through ``palette`` by entry position."""

    return palette[index % len(palette)]


def base_records(table: Table, request: ChartRequest) -> List[Record]:
    """Attach ``label`` and the coerced ``value`` to every row."""

    return [
        {
            "label": row.get(request.x_field, ""),
            "value": coerce_numeric(row.get(request.y_field)),
        }
        for row in table.rows
    ]


def numeric_columns(table: Table) -> List[str]:
    """Columns whose value in the first row reads as a finite number."""

    if not table.rows:
        return []
    first = table.rows[0]
    return [name for name in table.unique_columns() if is_numeric(first.get(name))]


def _plain(table: Table, request: ChartRequest) -> ChartDataset:
    return ChartDataset(kind=request.kind, records=tuple(base_records(table, request)))


def _colored(table: Table, request: ChartRequest) -> ChartDataset:
    records = [
        {**record, "color": palette_color(index)}
        for index, record in enumerate(base_records(table, request))
    ]
    return ChartDataset(kind=request.kind, records=tuple(records))


def _radar(table: Table, request: ChartRequest) -> ChartDataset:
    series = numeric_columns(table)[:RADAR_SERIES_LIMIT]
    records = []
    for row in table.rows[:RADAR_ROW_LIMIT]:
        record: Record = {"label": row.get(request.x_field, "")}
        for name in series:
            record[name] = coerce_numeric(row.get(name))
        records.append(record)
    return ChartDataset(kind=request.kind, records=tuple(records), series=tuple(series))


def _treemap(table: Table, request: ChartRequest) -> ChartDataset:
    records = []
    for index, record in enumerate(base_records(table, request)):
        # Treemap nodes need a positive area.
        size = abs(record["value"]) or 1.0
        records.append(
            {
                "label": record["label"],
                "size": size,
                "color": palette_color(index, EXTENDED_PALETTE),
            }
        )
    return ChartDataset(kind=request.kind, records=tuple(records), series=("size",))


def _radial_bar(table: Table, request: ChartRequest) -> ChartDataset:
    base = base_records(table, request)
    if not base:
        return ChartDataset(kind=request.kind)
    max_value = max(record["value"] for record in base)
    records = []
    for index, record in enumerate(base[:RADIAL_BAR_ROW_LIMIT]):
        value = record["value"]
        records.append(
            {
                "label": record["label"],
                "value": value,
                "color": palette_color(index, EXTENDED_PALETTE),
                "percentage": value / max_value * 100 if max_value else 0.0,
            }
        )
    return ChartDataset(kind=request.kind, records=tuple(records))


_SHAPERS: Dict[ChartKind, Callable[[Table, ChartRequest], ChartDataset]] = {
    ChartKind.BAR: _plain,
    ChartKind.LINE: _plain,
    ChartKind.SCATTER: _plain,
    ChartKind.AREA: _plain,
    ChartKind.COMPOSED: _plain,
    ChartKind.PIE: _colored,
    ChartKind.DONUT: _colored,
    ChartKind.FUNNEL: _colored,
    ChartKind.RADAR: _radar,
    ChartKind.TREEMAP: _treemap,
    ChartKind.RADIAL_BAR: _radial_bar,
}


def transform(table: Table, request: ChartRequest) -> ChartDataset:
    """Build the :class:`ChartDataset` for ``request`` from ``table``.

    Pure and deterministic: colours depend only on row position.  Unknown
    field names and malformed cells never raise; they flow through the
    numeric coercion policy instead.
    """

    return _SHAPERS[ChartKind(request.kind)](table, request)


__all__ = [
    "EXTENDED_PALETTE",
    "PALETTE",
    "base_records",
    "numeric_columns",
    "palette_color",
    "transform",
]
