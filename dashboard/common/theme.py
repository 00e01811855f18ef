"""Persisted dark-mode preference."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

import streamlit as st

from utils.logging import get_logger

logger = get_logger(__name__)

THEME_KEY = "darkMode"
"""Key under which the preference is stored in the preferences file."""


def system_prefers_dark() -> bool:
    """Return ``True`` when the host Streamlit theme is configured as dark."""

    try:
        base = st.get_option("theme.base")
    except RuntimeError:
        return False
    return str(base or "").lower() == "dark"


def load_dark_mode(path: Path | str, *, system_default: bool = False) -> bool:
    """Read the stored preference, falling back to ``system_default``.

    Parameters
    ----------
    path:
        Location of the JSON preferences file.
    system_default:
        Value used when no valid preference has been saved yet.
    """

    path = Path(path).expanduser()
    if not path.exists():
        return system_default
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable preferences file %s: %s", path, exc)
        return system_default
    if not isinstance(payload, Mapping) or not isinstance(payload.get(THEME_KEY), bool):
        return system_default
    return payload[THEME_KEY]


def save_dark_mode(path: Path | str, value: bool) -> None:
    """Write the preference, keeping any other keys already in the file."""

    path = Path(path).expanduser()
    payload = {}
    if path.exists():
        try:
            existing = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            existing = {}
        if isinstance(existing, Mapping):
            payload.update(existing)
    payload[THEME_KEY] = bool(value)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


__all__ = ["THEME_KEY", "load_dark_mode", "save_dark_mode", "system_prefers_dark"]
