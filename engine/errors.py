"""Exception types shared by the Chartify engine."""
from __future__ import annotations


class ChartifyError(Exception):
    """Base class for errors raised by Chartify."""


class IngestionInProgressError(ChartifyError):
    """Raised when a second ingestion is started while one is still running."""


__all__ = ["ChartifyError", "IngestionInProgressError"]
