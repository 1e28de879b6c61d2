from __future__ import annotations

from datetime import date

import pytest

from src.squad_tracker.squad_tracker.competitions.model import Competition
from src.squad_tracker.squad_tracker.semesters.model import Semester
from tests.fakes import A, InMemoryRecords, L, P, attendance, result, session


@pytest.fixture
def fall_semester() -> Semester:
    return Semester(semester_id=1, name="Fall 2025", start_date=date(2025, 8, 1), end_date=date(2025, 12, 20), is_active=True)


@pytest.fixture
def spring_semester() -> Semester:
    return Semester(semester_id=2, name="Spring 2026", start_date=date(2026, 1, 10), end_date=date(2026, 5, 30))


@pytest.fixture
def two_session_records(fall_semester, spring_semester) -> InMemoryRecords:
    """Two sessions, three players: [P, P, A] then [P, L, A]."""

    return InMemoryRecords(
        semesters=[fall_semester, spring_semester],
        sessions=[session(1, date(2025, 9, 1)), session(2, date(2025, 9, 8))],
        records=attendance(1, [P, P, A]) + attendance(2, [P, L, A]),
        competitions=[
            Competition(competition_id=10, competition_date=date(2025, 10, 4), name="Regional Open"),
            Competition(competition_id=20, competition_date=date(2024, 3, 1), name="Old Cup"),
        ],
        results=[
            result(1, 10, 1, medal="GOLD", wins=3, matches=3),
            result(2, 10, 2, medal="BRONZE", wins=0, matches=1),
            result(3, 20, 1, medal="SILVER", wins=1, matches=3),
        ],
    )
