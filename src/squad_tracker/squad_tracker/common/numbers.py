"""Numeric helpers shared by the aggregators.

All zero-division and bad-input coercion goes through here so every statistic
degrades the same way on empty or dirty data.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional


def safe_ratio(numerator: float, denominator: float) -> float:
    """``numerator / denominator``, or 0.0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def optional_ratio(numerator: float, denominator: float) -> Optional[float]:
    """Like :func:`safe_ratio` but returns None when there is nothing to divide by."""
    if denominator <= 0:
        return None
    return numerator / denominator


def coerce_count(value: Any) -> int:
    """Read a stored non-negative counter, clamping anything invalid to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(int(value), 0)
    if isinstance(value, str):
        try:
            return max(int(value.strip()), 0)
        except ValueError:
            return 0
    return 0


def round_half_up(value: float, places: int = 1) -> float:
    """Round with halves going up (6.25 -> 6.3), as shown in the UI."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
