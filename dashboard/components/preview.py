"""Data preview table."""

from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from engine.models import Table


def preview_summary(table: Table) -> str:
    rows, cols = table.shape
    return f"{rows} rows × {cols} columns"


def preview_frame(table: Table, limit: int = 10) -> Tuple[pd.DataFrame, int]:
    """Return the first ``limit`` rows and how many rows were left out."""

    frame = table.to_frame().head(limit)
    remaining = max(0, len(table.rows) - limit)
    return frame, remaining


def remaining_caption(remaining: int) -> Optional[str]:
    if remaining <= 0:
        return None
    return f"... and {remaining} more rows"


def render_preview(table: Table, *, visible: bool, limit: int = 10) -> bool:
    """Render the preview panel and return whether it should stay visible."""

    if table.is_empty:
        return visible

    info_col, button_col = st.columns([5, 1])
    with info_col:
        st.subheader("Data Preview")
        st.caption(preview_summary(table))
    with button_col:
        if st.button("Hide" if visible else "Show", key="chartify_preview_toggle"):
            visible = not visible

    if visible:
        frame, remaining = preview_frame(table, limit)
        st.dataframe(frame, use_container_width=True, hide_index=True)
        caption = remaining_caption(remaining)
        if caption:
            st.caption(caption)
    return visible


__all__ = ["preview_frame", "preview_summary", "remaining_caption", "render_preview"]
