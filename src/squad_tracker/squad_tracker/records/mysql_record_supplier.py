from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..common.numbers import coerce_count
from ..competitions.model import Competition, CompetitionResult
from ..core.enums import AttendanceStatus, Medal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from ..sessions.model import AttendanceRecord, Session
from .repository import RecordSupplier

logger = logging.getLogger(__name__)


def _to_result(r: dict) -> CompetitionResult:
    return CompetitionResult(
        result_id=int(r["result_id"]),
        competition_id=int(r["competition_id"]),
        player_id=int(r["player_id"]),
        medal=Medal.normalize(r.get("medal")),
        wins=coerce_count(r.get("wins")),
        matches=coerce_count(r.get("matches")),
        notes=r.get("notes"),
    )


class MySQLRecordSupplier(RecordSupplier):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_sessions_in_window(self, window_id: int) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.session_id, s.session_date, s.session_type, s.location, s.notes
                FROM sessions s
                JOIN semesters sm ON s.session_date BETWEEN sm.start_date AND sm.end_date
                WHERE sm.semester_id=%s
                ORDER BY s.session_date ASC, s.session_id ASC
                """,
                (int(window_id),),
            )
            rows = fetchall(cur)
            return [
                Session(
                    session_id=int(r["session_id"]),
                    session_date=r["session_date"],
                    session_type=r.get("session_type") or "",
                    location=r.get("location"),
                    notes=r.get("notes"),
                )
                for r in rows
            ]

    def list_competitions_in_window(self, window_id: int) -> Sequence[Competition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.competition_id, c.competition_date, c.name, c.location, c.notes
                FROM competitions c
                JOIN semesters sm ON c.competition_date BETWEEN sm.start_date AND sm.end_date
                WHERE sm.semester_id=%s
                ORDER BY c.competition_date ASC, c.competition_id ASC
                """,
                (int(window_id),),
            )
            comp_rows = fetchall(cur)
            if not comp_rows:
                return []

            placeholders, params = in_clause(int(r["competition_id"]) for r in comp_rows)
            cur.execute(
                f"""
                SELECT result_id, competition_id, player_id, medal, wins, matches, notes
                FROM competition_results
                WHERE competition_id IN ({placeholders})
                ORDER BY result_id ASC
                """,
                params,
            )
            results_by_comp: dict[int, list[CompetitionResult]] = {}
            for r in fetchall(cur):
                result = _to_result(r)
                results_by_comp.setdefault(result.competition_id, []).append(result)

            return [
                Competition(
                    competition_id=int(r["competition_id"]),
                    competition_date=r["competition_date"],
                    name=r["name"],
                    location=r.get("location"),
                    notes=r.get("notes"),
                    results=tuple(results_by_comp.get(int(r["competition_id"]), [])),
                )
                for r in comp_rows
            ]

    def list_attendance_records(self, session_ids: Iterable[int]) -> Sequence[AttendanceRecord]:
        ids = [int(i) for i in session_ids]
        if not ids:
            return []

        placeholders, params = in_clause(ids)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT ar.record_id, ar.session_id, ar.player_id, ar.status, ar.note, p.full_name
                FROM attendance_records ar
                JOIN players p ON p.player_id = ar.player_id
                WHERE ar.session_id IN ({placeholders})
                ORDER BY ar.session_id ASC, ar.record_id ASC
                """,
                params,
            )
            rows = fetchall(cur)
            logger.debug("Loaded %d attendance records for %d sessions", len(rows), len(ids))
            return [
                AttendanceRecord(
                    record_id=int(r["record_id"]),
                    session_id=int(r["session_id"]),
                    player_id=int(r["player_id"]),
                    status=AttendanceStatus.normalize(r.get("status")),
                    player_name=r.get("full_name") or "",
                    note=r.get("note"),
                )
                for r in rows
            ]

    def list_competition_results(
        self,
        *,
        player_id: Optional[int] = None,
        competition_ids: Optional[Iterable[int]] = None,
    ) -> Sequence[CompetitionResult]:
        clauses: list[str] = []
        params: list[object] = []

        if player_id is not None:
            clauses.append("player_id=%s")
            params.append(int(player_id))
        if competition_ids is not None:
            ids = [int(i) for i in competition_ids]
            if not ids:
                return []
            placeholders, id_params = in_clause(ids)
            clauses.append(f"competition_id IN ({placeholders})")
            params.extend(id_params)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT result_id, competition_id, player_id, medal, wins, matches, notes
                FROM competition_results
                {where}
                ORDER BY result_id ASC
                """,
                tuple(params),
            )
            return [_to_result(r) for r in fetchall(cur)]
