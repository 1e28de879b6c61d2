from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Coach
from .repository import CoachRepository


class MySQLCoachRepository(CoachRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT coach_id, full_name, role_title, is_active FROM coaches WHERE coach_id=%s",
                (int(coach_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Coach(
                coach_id=int(r["coach_id"]),
                full_name=r["full_name"],
                role_title=r.get("role_title"),
                is_active=bool(r.get("is_active", 1)),
            )

    def list_session_ids(self, coach_id: int) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT session_id FROM session_coaches WHERE coach_id=%s ORDER BY session_id",
                (int(coach_id),),
            )
            return [int(r["session_id"]) for r in fetchall(cur)]
