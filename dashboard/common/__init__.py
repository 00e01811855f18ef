"""Common utilities shared by the Chartify dashboard."""

from __future__ import annotations

from .theme import THEME_KEY, load_dark_mode, save_dark_mode, system_prefers_dark

__all__ = [
    "THEME_KEY",
    "load_dark_mode",
    "save_dark_mode",
    "system_prefers_dark",
]
