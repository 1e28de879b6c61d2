from datetime import date

from src.squad_tracker.squad_tracker.coaches.model import Coach
from src.squad_tracker.squad_tracker.stats.coach import CoachStatsService
from src.squad_tracker.squad_tracker.stats.model import CoachStat
from tests.fakes import InMemoryCoaches, InMemoryRecords, P, A, attendance, session


def _records(fall_semester):
    return InMemoryRecords(
        semesters=[fall_semester],
        sessions=[
            session(1, date(2025, 9, 1)),
            session(2, date(2025, 9, 8)),
            session(3, date(2024, 9, 8)),
        ],
        records=attendance(1, [P, P, A, A]) + attendance(2, [P, P, P, A]) + attendance(3, [P]),
    )


def test_coach_rate_covers_only_coached_sessions_in_window(fall_semester):
    coaches = InMemoryCoaches([Coach(coach_id=5, full_name="Coach Kim")], {5: [2, 3]})

    stat = CoachStatsService(_records(fall_semester), coaches).coach_stat(5, 1)

    assert stat == CoachStat(coach_id=5, full_name="Coach Kim", total_sessions=1, attendance_rate=0.75)


def test_coach_without_sessions_in_window_is_zero(fall_semester):
    coaches = InMemoryCoaches([Coach(coach_id=5, full_name="Coach Kim")], {5: [3]})

    stat = CoachStatsService(_records(fall_semester), coaches).coach_stat(5, 1)

    assert stat.total_sessions == 0
    assert stat.attendance_rate == 0.0


def test_unknown_coach_returns_none(fall_semester):
    assert CoachStatsService(_records(fall_semester), InMemoryCoaches()).coach_stat(42, 1) is None
