"""Named transitions on :class:`~dashboard.state.app_state.AppState`.

Every write to the session state goes through one of these helpers so the
Streamlit layer never assigns fields ad hoc.
"""
from __future__ import annotations

from typing import Optional

from dashboard.state.app_state import AppState, AppStateManager
from engine.catalog import default_axes
from engine.errors import IngestionInProgressError
from engine.loader import Content, DataLoader
from engine.models import ChartKind, IngestResult, Table
from utils.logging import get_logger

logger = get_logger(__name__)

TOGGLE_FLAGS = ("show_preview", "show_grid", "show_legend")


def ingest_started(manager: AppStateManager) -> AppState:
    """Mark an ingestion as in flight and clear the previous outcome."""

    return manager.update(is_loading=True, table=Table.empty(), error=None)


def ingest_succeeded(manager: AppStateManager, result: IngestResult) -> AppState:
    """Store a freshly parsed table and default the axes from its columns."""

    if not result.ok:
        raise ValueError("ingest_succeeded requires a successful IngestResult")
    x_field, y_field = default_axes(result.columns)
    return manager.update(
        is_loading=False,
        table=result.table,
        error=None,
        x_field=x_field,
        y_field=y_field,
    )


def ingest_failed(manager: AppStateManager, message: str) -> AppState:
    """Replace any table with the error ``message``."""

    return manager.update(is_loading=False, table=Table.empty(), error=str(message), x_field="", y_field="")


def apply_ingest_result(manager: AppStateManager, result: IngestResult) -> AppState:
    if result.ok:
        return ingest_succeeded(manager, result)
    return ingest_failed(manager, result.error or "")


def parse_file(
    manager: AppStateManager,
    filename: str,
    content: Content,
    loader: Optional[DataLoader] = None,
) -> AppState:
    """Run the ingestion pipeline for one upload and record its outcome.

    A second upload while ``is_loading`` is set is refused with
    :class:`IngestionInProgressError`.
    """

    if manager.state.is_loading:
        raise IngestionInProgressError(f"Cannot ingest '{filename}' while another file is being parsed.")
    loader = loader or DataLoader()
    ingest_started(manager)
    try:
        result = loader.parse(filename, content)
    except Exception:
        manager.set("is_loading", False)
        raise
    return apply_ingest_result(manager, result)


def reset(manager: AppStateManager) -> AppState:
    """Clear the table and chart selections; the uploader is re-created."""

    token = int(manager.get("upload_token", 0)) + 1
    return manager.update(
        table=Table.empty(),
        error=None,
        is_loading=False,
        chart_kind=ChartKind.BAR,
        x_field="",
        y_field="",
        upload_token=token,
    )


def axis_changed(manager: AppStateManager, *, x: Optional[str] = None, y: Optional[str] = None) -> AppState:
    updates = {}
    if x is not None:
        updates["x_field"] = x
    if y is not None:
        updates["y_field"] = y
    return manager.update(updates)


def chart_kind_changed(manager: AppStateManager, kind: ChartKind | str) -> AppState:
    return manager.update(chart_kind=ChartKind.from_value(str(getattr(kind, "value", kind))))


def theme_toggled(manager: AppStateManager) -> bool:
    """Flip dark mode and return the new value."""

    value = not bool(manager.get("dark_mode", False))
    manager.set("dark_mode", value)
    return value


def toggle_flag(manager: AppStateManager, name: str) -> bool:
    if name not in TOGGLE_FLAGS:
        raise KeyError(f"Unknown display flag '{name}'. Expected one of: {', '.join(TOGGLE_FLAGS)}.")
    value = not bool(manager.get(name))
    manager.set(name, value)
    return value


__all__ = [
    "TOGGLE_FLAGS",
    "apply_ingest_result",
    "axis_changed",
    "chart_kind_changed",
    "ingest_failed",
    "ingest_started",
    "ingest_succeeded",
    "parse_file",
    "reset",
    "theme_toggled",
    "toggle_flag",
]
