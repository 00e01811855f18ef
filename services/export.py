"""Chart export: static images through Kaleido and a JSON configuration file."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from engine.errors import ChartifyError
from engine.models import ChartKind, Table
from utils.logging import get_logger, log_event

logger = get_logger(__name__)

EXPORT_VERSION = "1.0.0"


class ExportError(ChartifyError):
    """Raised when a chart cannot be exported; application state is untouched."""


class ExportFormat(str, Enum):
    PNG = "png"
    PDF = "pdf"
    JSON = "json"

    @property
    def mime(self) -> str:
        return _MIME_TYPES[self]


_MIME_TYPES = {
    ExportFormat.PNG: "image/png",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.JSON: "application/json",
}


@dataclass(frozen=True)
class ChartConfigPayload:
    """Chart configuration written by the JSON export."""

    chart_kind: ChartKind
    x_field: str
    y_field: str
    rows: List[Dict[str, Any]] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)

    @classmethod
    def from_table(cls, table: Table, chart_kind: ChartKind | str, x_field: str, y_field: str) -> "ChartConfigPayload":
        return cls(
            chart_kind=ChartKind(chart_kind),
            x_field=x_field,
            y_field=y_field,
            rows=[dict(row) for row in table.rows],
            columns=list(table.columns),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "chartKind": self.chart_kind.value,
            "xField": self.x_field,
            "yField": self.y_field,
            "rows": [dict(row) for row in self.rows],
            "columns": list(self.columns),
        }


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    data: bytes
    mime: str


def _epoch_ms(now: datetime) -> int:
    return int(now.timestamp() * 1000)


def _render_image(figure: Any, fmt: ExportFormat, image_options: Mapping[str, Any]) -> bytes:
    if figure is None:
        raise ExportError("No chart found to export")
    try:
        return figure.to_image(format=fmt.value, **dict(image_options))
    except Exception as exc:
        log_event("export_failed", {"format": fmt.value, "error": str(exc)}, level="error", logger=logger)
        raise ExportError(f"Failed to export chart as {fmt.value.upper()}") from exc


def build_config_document(payload: ChartConfigPayload | Mapping[str, Any], now: datetime) -> Dict[str, Any]:
    """Wrap ``payload`` with a timestamp and format version."""

    data = payload.as_dict() if isinstance(payload, ChartConfigPayload) else dict(payload)
    return {"timestamp": now.isoformat(), "data": data, "version": EXPORT_VERSION}


def export_chart(
    fmt: ExportFormat | str,
    *,
    figure: Any = None,
    payload: ChartConfigPayload | Mapping[str, Any] | None = None,
    now: Optional[datetime] = None,
    image_options: Optional[Mapping[str, Any]] = None,
) -> ExportArtifact:
    """Produce a downloadable artifact for ``fmt``.

    ``png`` and ``pdf`` rasterise ``figure`` (anything with a Plotly-style
    ``to_image``); ``json`` serialises ``payload``.  Failures raise
    :class:`ExportError`.
    """

    try:
        fmt = ExportFormat(fmt)
    except ValueError as exc:
        raise ExportError("Export format not supported") from exc

    now = now or datetime.now(timezone.utc)
    stamp = _epoch_ms(now)

    if fmt is ExportFormat.JSON:
        if payload is None:
            raise ExportError("No chart configuration to export")
        document = build_config_document(payload, now)
        data = json.dumps(document, indent=2, ensure_ascii=False, default=str).encode("utf-8")
        artifact = ExportArtifact(filename=f"chart-config-{stamp}.json", data=data, mime=fmt.mime)
    else:
        data = _render_image(figure, fmt, image_options or {})
        artifact = ExportArtifact(filename=f"chart-{stamp}.{fmt.value}", data=data, mime=fmt.mime)

    log_event(
        "export_produced",
        {"format": fmt.value, "file": artifact.filename, "bytes": len(artifact.data)},
        logger=logger,
    )
    return artifact


__all__ = [
    "ChartConfigPayload",
    "EXPORT_VERSION",
    "ExportArtifact",
    "ExportError",
    "ExportFormat",
    "build_config_document",
    "export_chart",
]
