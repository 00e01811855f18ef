"""Chart visualisation panel with display toggles and export actions."""

from __future__ import annotations

from typing import Callable, Optional

import streamlit as st
from plotly.graph_objs import Figure

from engine.catalog import chart_caption, chart_notice
from engine.models import ChartRequest
from services.export import ExportArtifact, ExportError, ExportFormat

_EXPORT_LABELS = {
    ExportFormat.PNG: "Export as PNG",
    ExportFormat.PDF: "Export as PDF",
    ExportFormat.JSON: "Export Configuration",
}


def render_display_toggles(show_grid: bool, show_legend: bool) -> tuple[bool, bool]:
    grid_col, legend_col = st.columns(2)
    with grid_col:
        grid = st.checkbox("Grid", value=show_grid, key="chartify_show_grid")
    with legend_col:
        legend = st.checkbox("Legend", value=show_legend, key="chartify_show_legend")
    return bool(grid), bool(legend)


def render_chart(figure: Figure, request: ChartRequest) -> None:
    st.subheader("Chart Visualization")
    st.caption(chart_caption(request.kind, request.x_field, request.y_field))
    notice = chart_notice(request.kind)
    if notice:
        title, body = notice
        st.info(f"**{title}** {body}")
    st.plotly_chart(figure, use_container_width=True)


def render_export_buttons(
    exporter: Callable[[ExportFormat], ExportArtifact],
    *,
    artifact: Optional[ExportArtifact] = None,
) -> Optional[ExportArtifact]:
    """Render one button per export format.

    ``exporter`` is only invoked for the clicked format.  The produced
    artifact is returned so the caller can keep it across reruns; an
    :class:`ExportError` is shown as an error notice and leaves ``artifact``
    unchanged.
    """

    columns = st.columns(len(_EXPORT_LABELS))
    for column, (fmt, label) in zip(columns, _EXPORT_LABELS.items()):
        with column:
            if st.button(label, key=f"chartify_export_{fmt.value}"):
                try:
                    artifact = exporter(fmt)
                except ExportError as exc:
                    st.error(str(exc))

    if artifact is not None:
        st.download_button(
            f"Download {artifact.filename}",
            data=artifact.data,
            file_name=artifact.filename,
            mime=artifact.mime,
            key="chartify_download",
        )
    return artifact


__all__ = ["render_chart", "render_display_toggles", "render_export_buttons"]
