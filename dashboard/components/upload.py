"""File upload area."""

from __future__ import annotations

from typing import Any, Optional

import streamlit as st

from engine.models import FileKind

ACCEPTED_TYPES = [kind.value for kind in FileKind]


def render_uploader(*, token: int, busy: bool, max_upload_mb: int) -> Optional[Any]:
    """Render the uploader and return the selected file, if any.

    ``token`` is part of the widget key so a reset clears the selection.
    """

    st.subheader("Upload your data")
    uploaded = st.file_uploader(
        "Drop your file here or browse",
        type=ACCEPTED_TYPES,
        key=f"chartify_upload_{token}",
        disabled=busy,
        help=f"Supports CSV, XLS, XLSX files up to {max_upload_mb}MB",
    )
    return uploaded


__all__ = ["ACCEPTED_TYPES", "render_uploader"]
