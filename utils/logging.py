"""Logging helpers for Chartify."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_LOGGER_NAME = "chartify"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the shared ``chartify`` logger or one of its children.

    The handler is attached once, on the root ``chartify`` logger, so module
    loggers created with ``get_logger(__name__)`` propagate to it.
    """

    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        root.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    if not name or name == _LOGGER_NAME:
        return root
    return root.getChild(name)


def set_log_level(level: str | int) -> None:
    """Apply ``level`` (name or number) to the shared logger."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    get_logger().setLevel(level)


def log_event(
    event: str,
    payload: Dict[str, Any] | None = None,
    *,
    level: str = "info",
    logger: Optional[logging.Logger] = None,
) -> None:
    """Write one structured log event in JSON format."""

    target = logger or get_logger()
    data: Dict[str, Any] = {
        "event": event,
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level.lower(),
    }
    if payload:
        data.update(payload)

    writer = getattr(target, level.lower(), target.info)
    writer("%s", json.dumps(data, ensure_ascii=False, default=str))


__all__ = ["get_logger", "log_event", "set_log_level"]
