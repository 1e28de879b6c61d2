from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

from ..common.datetime_utils import short_label
from ..common.numbers import round_half_up
from ..core.constants import TREND_RATE_DECIMALS
from ..core.enums import AttendanceStatus
from ..sessions.model import AttendanceRecord, Session
from .model import TrendPoint
from .turnout import calc_turnout


def build_trend(sessions: Sequence[Session], records: Iterable[AttendanceRecord]) -> list[TrendPoint]:
    """One point per session, in the order given.

    A session without records yields rate 0 so the series stays aligned with
    the session calendar. Rates are percentages rounded to one decimal.
    """

    by_session: dict[int, list[AttendanceStatus]] = defaultdict(list)
    for r in records:
        by_session[r.session_id].append(r.status)

    return [
        TrendPoint(
            label=short_label(s.session_date),
            rate=round_half_up(calc_turnout(by_session.get(s.session_id, [])) * 100, TREND_RATE_DECIMALS),
        )
        for s in sessions
    ]
