"""Top/bottom attendance rankings over distinct rate values.

Players sharing a rate share a rank, so a list can hold more players than its
size when ties sit on the boundary.
"""
from __future__ import annotations

from typing import Collection, Iterable, Sequence

from ..core.constants import DEFAULT_LEADERBOARD_SIZE, MIN_RECORDS_TO_RANK
from .model import AttendanceStat, Leaderboard


def qualifying(stats: Iterable[AttendanceStat], *, min_records: int = MIN_RECORDS_TO_RANK) -> list[AttendanceStat]:
    return [s for s in stats if s.total >= min_records]


def distinct_rates(stats: Iterable[AttendanceStat]) -> list[float]:
    """Unique rates, highest first."""

    return sorted({s.rate for s in stats}, reverse=True)


def select_top(stats: Sequence[AttendanceStat], rates_desc: Sequence[float], size: int) -> list[AttendanceStat]:
    chosen = set(rates_desc[: max(size, 0)])
    picked = [s for s in stats if s.rate in chosen]
    return sorted(picked, key=lambda s: s.rate, reverse=True)


def select_bottom(
    stats: Sequence[AttendanceStat],
    rates_desc: Sequence[float],
    size: int,
    *,
    exclude: Collection[int] = (),
) -> list[AttendanceStat]:
    """Players at the ``size`` lowest distinct rates, minus ``exclude`` player ids."""

    rates_asc = list(reversed(rates_desc))
    chosen = set(rates_asc[: max(size, 0)])
    picked = [s for s in stats if s.rate in chosen and s.player_id not in exclude]
    return sorted(picked, key=lambda s: s.rate)


def rank(
    stats: Iterable[AttendanceStat],
    *,
    size: int = DEFAULT_LEADERBOARD_SIZE,
    min_records: int = MIN_RECORDS_TO_RANK,
) -> Leaderboard:
    pool = qualifying(stats, min_records=min_records)
    if not pool:
        return Leaderboard()

    rates_desc = distinct_rates(pool)
    top = select_top(pool, rates_desc, size)
    bottom = select_bottom(pool, rates_desc, size, exclude={s.player_id for s in top})
    return Leaderboard(top=top, bottom=bottom)
