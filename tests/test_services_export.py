from __future__ import annotations

import json
import pathlib
import sys
from datetime import datetime, timezone

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

pytest.importorskip("pandas")

from engine.models import ChartKind, Table
from services.export import (
    EXPORT_VERSION,
    ChartConfigPayload,
    ExportError,
    ExportFormat,
    export_chart,
)

NOW = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
STAMP = int(NOW.timestamp() * 1000)


class FakeFigure:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def to_image(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail:
            raise RuntimeError("kaleido crashed")
        return b"image:" + kwargs["format"].encode()


@pytest.fixture
def payload():
    table = Table.from_records(["month", "sales"], [{"month": "Jan", "sales": "10"}])
    return ChartConfigPayload.from_table(table, "pie", "month", "sales")


def test_payload_uses_exported_key_names(payload):
    assert payload.as_dict() == {
        "chartKind": "pie",
        "xField": "month",
        "yField": "sales",
        "rows": [{"month": "Jan", "sales": "10"}],
        "columns": ["month", "sales"],
    }
    assert payload.chart_kind is ChartKind.PIE


def test_json_export_wraps_payload(payload):
    artifact = export_chart("json", payload=payload, now=NOW)

    assert artifact.filename == f"chart-config-{STAMP}.json"
    assert artifact.mime == "application/json"
    document = json.loads(artifact.data)
    assert document["version"] == EXPORT_VERSION
    assert document["timestamp"] == NOW.isoformat()
    assert document["data"] == payload.as_dict()


def test_json_export_requires_payload():
    with pytest.raises(ExportError):
        export_chart(ExportFormat.JSON, now=NOW)


@pytest.mark.parametrize(("fmt", "mime"), [("png", "image/png"), ("pdf", "application/pdf")])
def test_image_export_rasterises_figure(fmt, mime):
    figure = FakeFigure()

    artifact = export_chart(fmt, figure=figure, now=NOW, image_options={"width": 800, "scale": 2})

    assert artifact.filename == f"chart-{STAMP}.{fmt}"
    assert artifact.mime == mime
    assert artifact.data == f"image:{fmt}".encode()
    assert figure.calls == [{"format": fmt, "width": 800, "scale": 2}]


def test_image_export_without_chart():
    with pytest.raises(ExportError, match="No chart found to export"):
        export_chart("png", figure=None, now=NOW)


def test_image_export_failure_is_wrapped():
    with pytest.raises(ExportError, match="Failed to export chart as PDF") as info:
        export_chart("pdf", figure=FakeFigure(fail=True), now=NOW)
    assert isinstance(info.value.__cause__, RuntimeError)


def test_unsupported_format():
    with pytest.raises(ExportError, match="not supported"):
        export_chart("svg", figure=FakeFigure(), now=NOW)
