"""Page header with the dark-mode toggle."""

from __future__ import annotations

from typing import Optional

import streamlit as st


def render_header(
    title: str,
    *,
    dark_mode: bool,
    description: Optional[str] = None,
    toggle_key: str = "chartify_dark_mode_toggle",
) -> bool:
    """Render the title row and return the requested dark-mode value.

    Args:
        title: The main heading for the page.
        dark_mode: Current theme flag, used as the toggle's initial value.
        description: Optional caption under the title.
        toggle_key: Widget key for the toggle.
    """

    title_col, toggle_col = st.columns([5, 1])
    with title_col:
        st.title(title)
        if description:
            st.caption(description)
    with toggle_col:
        requested = st.toggle("Dark mode", value=dark_mode, key=toggle_key)
    return bool(requested)


__all__ = ["render_header"]
