"""Numeric coercion policy used by the chart transformer.

Cells arrive as raw strings or spreadsheet numbers.  Text is read up to the
end of its leading number, so ``"45%"`` is ``45.0`` and ``"12.5 kg"`` is
``12.5``.  Anything without a leading finite number is treated as ``0.0``;
this is a lossy policy, not an error path.
"""
from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any, Optional

LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw: Any) -> Optional[float]:
    """Return the leading number of ``raw`` as a finite float, or ``None``."""

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Real):
        value = float(raw)
    else:
        match = LEADING_NUMBER.match(str(raw))
        if match is None:
            return None
        value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def coerce_numeric(raw: Any) -> float:
    """Parse ``raw`` as a float, substituting ``0.0`` on failure."""

    value = parse_number(raw)
    return 0.0 if value is None else value


def is_numeric(raw: Any) -> bool:
    return parse_number(raw) is not None


__all__ = ["LEADING_NUMBER", "coerce_numeric", "is_numeric", "parse_number"]
