from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Semester
from .repository import SemesterRepository

_COLUMNS = "semester_id, name, start_date, end_date, is_active"


def _to_semester(r: dict) -> Semester:
    return Semester(
        semester_id=int(r["semester_id"]),
        name=r["name"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        is_active=bool(r.get("is_active")),
    )


class MySQLSemesterRepository(SemesterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Semester]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM semesters ORDER BY start_date DESC, semester_id DESC")
            return [_to_semester(r) for r in fetchall(cur)]

    def get_by_id(self, semester_id: int) -> Optional[Semester]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM semesters WHERE semester_id=%s", (int(semester_id),))
            r = fetchone(cur)
            return _to_semester(r) if r else None

    def get_active(self) -> Optional[Semester]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM semesters
                WHERE is_active=1
                ORDER BY start_date DESC
                LIMIT 1
                """
            )
            r = fetchone(cur)
            return _to_semester(r) if r else None
