from __future__ import annotations

from datetime import date

from src.squad_tracker.squad_tracker.core.enums import AttendanceStatus, Medal
from src.squad_tracker.squad_tracker.records.mysql_record_supplier import MySQLRecordSupplier


class FakeCursor:
    def __init__(self, batches):
        self._batches = list(batches)
        self.executed: list[tuple[str, tuple]] = []
        self._current = []

    def execute(self, sql, params=()):
        self.executed.append((sql, params))
        self._current = self._batches.pop(0) if self._batches else []

    def fetchall(self):
        return self._current

    def fetchone(self):
        return self._current[0] if self._current else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, *batches):
        self.cursor = FakeCursor(batches)
        self.connects = 0

    def connect(self):
        self.connects += 1
        return FakeConnection(self.cursor)


def test_no_session_ids_skips_query():
    factory = FakeConnFactory()

    assert MySQLRecordSupplier(factory).list_attendance_records([]) == []
    assert MySQLRecordSupplier(factory).list_competition_results(player_id=1, competition_ids=[]) == []
    assert factory.connects == 0


def test_attendance_rows_are_normalized():
    factory = FakeConnFactory(
        [
            {"record_id": 1, "session_id": 4, "player_id": 9, "status": "PRESENT", "note": None, "full_name": "Ana"},
            {"record_id": 2, "session_id": 4, "player_id": 10, "status": "??", "note": None, "full_name": "Ben"},
        ]
    )

    records = MySQLRecordSupplier(factory).list_attendance_records([4])

    assert [r.status for r in records] == [AttendanceStatus.PRESENT, AttendanceStatus.UNKNOWN]
    assert records[0].player_name == "Ana"
    sql, params = factory.cursor.executed[0]
    assert "IN (%s)" in sql
    assert params == (4,)


def test_competitions_get_results_attached():
    factory = FakeConnFactory(
        [{"competition_id": 3, "competition_date": date(2025, 10, 4), "name": "Open", "location": None, "notes": None}],
        [{"result_id": 1, "competition_id": 3, "player_id": 9, "medal": "TIN", "wins": None, "matches": -3, "notes": None}],
    )

    (comp,) = MySQLRecordSupplier(factory).list_competitions_in_window(1)

    assert comp.name == "Open"
    assert comp.results[0].medal is Medal.NONE
    assert comp.results[0].wins == 0
    assert comp.results[0].matches == 0


def test_unknown_window_returns_no_competitions():
    factory = FakeConnFactory([])

    assert MySQLRecordSupplier(factory).list_competitions_in_window(404) == []
    assert len(factory.cursor.executed) == 1
