from __future__ import annotations

from typing import Optional

from ..common.numbers import round_half_up
from ..core.constants import EMPTY_WIN_RATE_LABEL


def format_rate(rate: float) -> str:
    return f"{round_half_up(rate * 100, 1):.1f}%"


def format_win_rate(rate: Optional[float]) -> str:
    if rate is None:
        return EMPTY_WIN_RATE_LABEL
    return format_rate(rate)
