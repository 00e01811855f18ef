"""Streamlit entry point for Chartify."""

from __future__ import annotations

from typing import Any, Optional

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import streamlit as st

from actions.state_updates import (
    axis_changed,
    chart_kind_changed,
    parse_file,
    reset,
    theme_toggled,
    toggle_flag,
)
from dashboard.common.theme import load_dark_mode, save_dark_mode, system_prefers_dark
from dashboard.components import (
    render_axis_selector,
    render_chart,
    render_chart_type_selector,
    render_display_toggles,
    render_export_buttons,
    render_header,
    render_preview,
    render_uploader,
)
from dashboard.config import AppConfig, ConfigError, load_config
from dashboard.state.app_state import AppStateManager, ensure_session_state
from engine.errors import IngestionInProgressError
from engine.figures import build_figure
from engine.transformer import transform
from services.export import ChartConfigPayload, ExportArtifact, ExportFormat, export_chart
from utils.logging import get_logger, set_log_level

logger = get_logger(__name__)

_ARTIFACT_KEY = "export_artifact"
_UPLOAD_ID_KEY = "last_upload_id"


def _upload_id(uploaded: Any) -> Any:
    return getattr(uploaded, "file_id", None) or (uploaded.name, getattr(uploaded, "size", None))


def _handle_upload(manager: AppStateManager, uploaded: Any) -> None:
    upload_id = _upload_id(uploaded)
    if manager.get(_UPLOAD_ID_KEY) == upload_id:
        return
    manager.set(_UPLOAD_ID_KEY, upload_id)
    manager.set(_ARTIFACT_KEY, None)
    try:
        with st.spinner("Processing file..."):
            parse_file(manager, uploaded.name, uploaded)
    except IngestionInProgressError as exc:
        st.warning(str(exc))


def _render_theme(manager: AppStateManager, config: AppConfig) -> None:
    requested = render_header(
        config.title,
        dark_mode=manager.state.dark_mode,
        description="Transform your Excel & CSV data into charts.",
    )
    if requested != manager.state.dark_mode:
        value = theme_toggled(manager)
        try:
            save_dark_mode(config.preferences_file, value)
        except OSError as exc:
            logger.warning("Could not persist theme preference: %s", exc)


def _render_workspace(manager: AppStateManager, config: AppConfig) -> None:
    state = manager.state

    title_col, reset_col = st.columns([5, 1])
    with title_col:
        st.subheader("Chart Configuration")
    with reset_col:
        if st.button("Reset", key="chartify_reset"):
            reset(manager)
            manager.update({_ARTIFACT_KEY: None, _UPLOAD_ID_KEY: None})
            st.rerun()

    visible = render_preview(state.table, visible=state.show_preview, limit=config.preview_rows)
    if visible != state.show_preview:
        toggle_flag(manager, "show_preview")

    kind = render_chart_type_selector(state.chart_kind, state.table.columns)
    if kind is not state.chart_kind:
        chart_kind_changed(manager, kind)

    x_field, y_field = render_axis_selector(state.table.columns, state.x_field, state.y_field)
    axis_changed(manager, x=x_field, y=y_field)

    request = state.chart_request()
    if request is None:
        return

    grid, legend = render_display_toggles(state.show_grid, state.show_legend)
    if grid != state.show_grid:
        toggle_flag(manager, "show_grid")
    if legend != state.show_legend:
        toggle_flag(manager, "show_legend")

    dataset = transform(state.table, request)
    figure = build_figure(
        dataset,
        request,
        show_grid=state.show_grid,
        show_legend=state.show_legend,
        dark_mode=state.dark_mode,
    )
    render_chart(figure, request)

    def _export(fmt: ExportFormat) -> ExportArtifact:
        payload = ChartConfigPayload.from_table(state.table, request.kind, request.x_field, request.y_field)
        return export_chart(fmt, figure=figure, payload=payload, image_options=config.image_options())

    artifact: Optional[ExportArtifact] = manager.get(_ARTIFACT_KEY)
    manager.set(_ARTIFACT_KEY, render_export_buttons(_export, artifact=artifact))


def main() -> None:
    st.set_page_config(page_title="Chartify", layout="wide")

    try:
        config = load_config()
    except ConfigError as exc:
        st.error(f"Configuration error: {exc}")
        return
    set_log_level(config.log_level)

    manager = ensure_session_state(
        st.session_state,
        dark_mode=load_dark_mode(config.preferences_file, system_default=system_prefers_dark()),
    )
    _render_theme(manager, config)

    state = manager.state
    if state.error:
        st.error(f"**Error Processing File**\n\n{state.error}")

    if not state.has_data:
        uploaded = render_uploader(
            token=state.upload_token,
            busy=state.is_loading,
            max_upload_mb=config.max_upload_mb,
        )
        if uploaded is not None:
            _handle_upload(manager, uploaded)
            if manager.state.has_data or manager.state.error:
                st.rerun()
        return

    _render_workspace(manager, config)
    st.caption("Chartify - Create charts from data quickly and easily")


if __name__ == "__main__":
    main()


__all__ = ["main"]
