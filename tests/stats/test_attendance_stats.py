from __future__ import annotations

from datetime import date

import pytest

from src.squad_tracker.squad_tracker.core.enums import AttendanceStatus
from src.squad_tracker.squad_tracker.sessions.model import AttendanceRecord
from src.squad_tracker.squad_tracker.stats.attendance import (
    AttendanceStatsService,
    summarize_players,
    summarize_team,
    total_breakdown,
)
from src.squad_tracker.squad_tracker.stats.model import StatusBreakdown, TeamStat
from tests.fakes import E, InMemoryRecords, P, attendance, session


def test_team_stats_two_sessions(two_session_records):
    svc = AttendanceStatsService(two_session_records)

    team = svc.team_stats(1)

    assert team.attendance_rate == pytest.approx(0.5)
    assert team.total_sessions == 2
    assert team.avg_attendance_per_session == pytest.approx(1.5)


def test_team_stats_window_without_sessions_is_zero(two_session_records):
    svc = AttendanceStatsService(two_session_records)

    assert svc.team_stats(2) == TeamStat(attendance_rate=0, total_sessions=0, avg_attendance_per_session=0)


def test_team_stats_unknown_window_is_zero(two_session_records):
    assert AttendanceStatsService(two_session_records).team_stats(999) == TeamStat.empty()


def test_sessions_without_records_still_count(fall_semester):
    records = InMemoryRecords(
        semesters=[fall_semester],
        sessions=[session(1, date(2025, 9, 1)), session(2, date(2025, 9, 8))],
        records=attendance(1, [P, P]),
    )

    team = AttendanceStatsService(records).team_stats(1)

    assert team.total_sessions == 2
    assert team.attendance_rate == 1.0
    assert team.avg_attendance_per_session == 1.0


def test_player_stats_counts_each_status(two_session_records):
    stats = {s.player_id: s for s in AttendanceStatsService(two_session_records).player_stats(1)}

    assert stats[1].present == 2 and stats[1].total == 2 and stats[1].rate == 1.0
    assert stats[2].present == 1 and stats[2].late == 1 and stats[2].rate == 0.5
    assert stats[3].absent == 2 and stats[3].rate == 0.0
    assert stats[1].full_name == "Player 1"


def test_player_without_records_is_omitted(fall_semester):
    records = InMemoryRecords(
        semesters=[fall_semester],
        sessions=[session(1, date(2025, 9, 1))],
        records=attendance(1, [P, E]),
    )

    stats = AttendanceStatsService(records).player_stats(1)

    assert [s.player_id for s in stats] == [1, 2]
    assert AttendanceStatsService(records).player_stat(3, 1) is None


def test_unknown_status_counts_toward_total_only():
    records = [
        AttendanceRecord(record_id=1, session_id=1, player_id=7, status=AttendanceStatus.PRESENT),
        AttendanceRecord(record_id=2, session_id=2, player_id=7, status="HOLIDAY"),
    ]

    (stat,) = summarize_players(records)

    assert stat.total == 2
    assert stat.present + stat.late + stat.absent + stat.excused == 1
    assert stat.rate == 0.5


def test_summarize_team_without_sessions():
    assert summarize_team([], attendance(1, [P])) == TeamStat.empty()


def test_latest_session_breakdown(two_session_records):
    b = AttendanceStatsService(two_session_records).latest_session_breakdown(1)

    assert b == StatusBreakdown(present=1, late=1, absent=1, excused=0, session_date=date(2025, 9, 8))


def test_latest_session_breakdown_empty_window(two_session_records):
    assert AttendanceStatsService(two_session_records).latest_session_breakdown(2) == StatusBreakdown()


def test_total_breakdown_sums_players(two_session_records):
    stats = AttendanceStatsService(two_session_records).player_stats(1)

    assert total_breakdown(stats) == StatusBreakdown(present=3, late=1, absent=2, excused=0)


def test_repeated_calls_are_identical(two_session_records):
    svc = AttendanceStatsService(two_session_records)

    assert svc.player_stats(1) == svc.player_stats(1)
    assert svc.team_stats(1) == svc.team_stats(1)
