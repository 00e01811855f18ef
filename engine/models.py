"""Dataclasses describing the tables and chart requests handled by Chartify."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

Record = Dict[str, Any]


class FileKind(str, Enum):
    """File formats accepted by the ingestion pipeline."""

    CSV = "csv"
    XLSX = "xlsx"
    XLS = "xls"

    @property
    def is_spreadsheet(self) -> bool:
        return self is not FileKind.CSV


class ChartKind(str, Enum):
    """Chart primitives the transformer knows how to shape data for."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    SCATTER = "scatter"
    AREA = "area"
    DONUT = "donut"
    RADAR = "radar"
    FUNNEL = "funnel"
    TREEMAP = "treemap"
    COMPOSED = "composed"
    RADIAL_BAR = "radialBar"

    @classmethod
    def from_value(cls, value: str) -> "ChartKind":
        """Create a :class:`ChartKind` from a raw string value."""

        try:
            return cls(value)
        except ValueError as exc:
            valid_values = ", ".join(item.value for item in cls)
            raise ValueError(f"Invalid chart kind '{value}'. Expected one of: {valid_values}.") from exc


@dataclass(frozen=True)
class Table:
    """Normalised result of parsing an uploaded file.

    ``columns`` keeps the header names in source order, duplicates included.
    Each row maps a column name to its raw cell value; when a header name is
    repeated the right-most cell wins.
    """

    columns: Tuple[str, ...] = ()
    rows: Tuple[Record, ...] = ()

    @classmethod
    def from_records(cls, columns: Sequence[str], rows: Sequence[Mapping[str, Any]]) -> "Table":
        return cls(columns=tuple(columns), rows=tuple(dict(row) for row in rows))

    @classmethod
    def empty(cls) -> "Table":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.rows), len(self.columns)

    def unique_columns(self) -> List[str]:
        """Column names with repeats removed, first occurrence kept."""

        return list(dict.fromkeys(self.columns))

    def to_frame(self) -> pd.DataFrame:
        """Materialise the table as a DataFrame for display."""

        columns = self.unique_columns()
        data = [[row.get(name, "") for name in columns] for row in self.rows]
        return pd.DataFrame(data, columns=columns)


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one ingestion attempt: a table or an error, never both."""

    table: Table = field(default_factory=Table.empty)
    error: Optional[str] = None

    @classmethod
    def success(cls, table: Table) -> "IngestResult":
        return cls(table=table, error=None)

    @classmethod
    def failure(cls, message: str) -> "IngestResult":
        return cls(table=Table.empty(), error=str(message))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def columns(self) -> Tuple[str, ...]:
        return self.table.columns

    @property
    def rows(self) -> Tuple[Record, ...]:
        return self.table.rows


@dataclass(frozen=True)
class ChartRequest:
    """User-chosen chart kind and axis mapping."""

    kind: ChartKind
    x_field: str
    y_field: str

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "ChartRequest":
        """Instantiate a :class:`ChartRequest` from a configuration mapping.

        Both the exported JSON keys (``chartKind``/``xField``/``yField``) and
        the short forms (``kind``/``x``/``y``) are accepted.
        """

        kind = cfg.get("chartKind", cfg.get("kind"))
        if not kind:
            raise ValueError("Chart configuration requires a 'chartKind' field.")
        x_field = cfg.get("xField", cfg.get("x", ""))
        y_field = cfg.get("yField", cfg.get("y", ""))
        return cls(
            kind=ChartKind.from_value(str(kind)),
            x_field=str(x_field),
            y_field=str(y_field),
        )


@dataclass(frozen=True)
class ChartDataset:
    """Chart-ready records for one chart kind.

    ``series`` names the record keys holding plotted values: ``("value",)``
    for most kinds, ``("size",)`` for treemaps and the detected numeric
    columns for radar charts.
    """

    kind: ChartKind
    records: Tuple[Record, ...] = ()
    series: Tuple[str, ...] = ("value",)

    def __len__(self) -> int:
        return len(self.records)

    def to_records(self) -> List[Record]:
        return [dict(record) for record in self.records]

    def to_frame(self) -> pd.DataFrame:
        columns = ["label", *self.series]
        if self.records and "color" in self.records[0]:
            columns.append("color")
        if self.records and "percentage" in self.records[0]:
            columns.append("percentage")
        return pd.DataFrame(self.to_records(), columns=columns)


__all__ = [
    "ChartDataset",
    "ChartKind",
    "ChartRequest",
    "FileKind",
    "IngestResult",
    "Record",
    "Table",
]
