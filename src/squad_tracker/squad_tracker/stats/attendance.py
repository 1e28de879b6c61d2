"""Attendance aggregation over a reporting window."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional, Sequence

from ..common.numbers import safe_ratio
from ..core.enums import AttendanceStatus
from ..records.repository import RecordSupplier
from ..sessions.model import AttendanceRecord, Session
from .model import AttendanceStat, StatusBreakdown, TeamStat, TrendPoint
from .trend import build_trend

logger = logging.getLogger(__name__)


def count_statuses(records: Iterable[AttendanceRecord]) -> Counter:
    return Counter(AttendanceStatus.normalize(r.status) for r in records)


def summarize_team(sessions: Sequence[Session], records: Sequence[AttendanceRecord]) -> TeamStat:
    """Team-wide rate plus average PRESENT count per session.

    Records whose session is not in ``sessions`` still count toward the rate;
    the average only sums presence of the listed sessions.
    """

    if not sessions:
        return TeamStat.empty()

    counts = count_statuses(records)
    present = counts[AttendanceStatus.PRESENT]

    present_per_session: Counter = Counter(
        r.session_id for r in records if AttendanceStatus.normalize(r.status) is AttendanceStatus.PRESENT
    )
    present_in_sessions = sum(present_per_session[s.session_id] for s in sessions)

    return TeamStat(
        attendance_rate=safe_ratio(present, len(records)),
        total_sessions=len(sessions),
        avg_attendance_per_session=safe_ratio(present_in_sessions, len(sessions)),
    )


def summarize_players(records: Iterable[AttendanceRecord]) -> list[AttendanceStat]:
    """One stat per player that has at least one record, in first-seen order.

    Players without records never appear; callers must not expect a row per roster player.
    """

    tallies: dict[int, Counter] = {}
    names: dict[int, str] = {}

    for r in records:
        tally = tallies.get(r.player_id)
        if tally is None:
            tally = Counter()
            tallies[r.player_id] = tally
            names[r.player_id] = r.player_name
        tally["total"] += 1
        tally[AttendanceStatus.normalize(r.status)] += 1

    out: list[AttendanceStat] = []
    for player_id, tally in tallies.items():
        present = tally[AttendanceStatus.PRESENT]
        out.append(
            AttendanceStat(
                player_id=player_id,
                full_name=names[player_id],
                present=present,
                late=tally[AttendanceStatus.LATE],
                absent=tally[AttendanceStatus.ABSENT],
                excused=tally[AttendanceStatus.EXCUSED],
                total=tally["total"],
                rate=safe_ratio(present, tally["total"]),
            )
        )
    return out


def breakdown(records: Iterable[AttendanceRecord], *, session: Optional[Session] = None) -> StatusBreakdown:
    counts = count_statuses(records)
    return StatusBreakdown(
        present=counts[AttendanceStatus.PRESENT],
        late=counts[AttendanceStatus.LATE],
        absent=counts[AttendanceStatus.ABSENT],
        excused=counts[AttendanceStatus.EXCUSED],
        session_date=session.session_date if session else None,
    )


def total_breakdown(stats: Iterable[AttendanceStat]) -> StatusBreakdown:
    """Sum of per-player status counts across a window."""

    present = late = absent = excused = 0
    for s in stats:
        present += s.present
        late += s.late
        absent += s.absent
        excused += s.excused
    return StatusBreakdown(present=present, late=late, absent=absent, excused=excused)


class AttendanceStatsService:
    """Windowed attendance statistics backed by a :class:`RecordSupplier`."""

    def __init__(self, records: RecordSupplier):
        self._records = records

    def _load(self, window_id: int) -> tuple[Sequence[Session], Sequence[AttendanceRecord]]:
        sessions = self._records.list_sessions_in_window(window_id)
        if not sessions:
            return [], []
        records = self._records.list_attendance_records([s.session_id for s in sessions])
        logger.debug("Window %s: %d sessions, %d attendance records", window_id, len(sessions), len(records))
        return sessions, records

    def team_stats(self, window_id: int) -> TeamStat:
        sessions, records = self._load(window_id)
        return summarize_team(sessions, records)

    def player_stats(self, window_id: int) -> list[AttendanceStat]:
        _, records = self._load(window_id)
        return summarize_players(records)

    def player_stat(self, player_id: int, window_id: int) -> Optional[AttendanceStat]:
        for stat in self.player_stats(window_id):
            if stat.player_id == player_id:
                return stat
        return None

    def trend(self, window_id: int) -> list[TrendPoint]:
        sessions, records = self._load(window_id)
        return build_trend(sessions, records)

    def latest_session_breakdown(self, window_id: int) -> StatusBreakdown:
        sessions = self._records.list_sessions_in_window(window_id)
        if not sessions:
            return StatusBreakdown()

        latest = sessions[-1]
        records = self._records.list_attendance_records([latest.session_id])
        return breakdown(records, session=latest)
