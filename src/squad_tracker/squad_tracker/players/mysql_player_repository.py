from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Player
from .repository import PlayerRepository


def _to_player(r: dict) -> Player:
    jersey = r.get("jersey_number")
    return Player(
        player_id=int(r["player_id"]),
        full_name=r["full_name"],
        jersey_number=int(jersey) if jersey is not None else None,
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLPlayerRepository(PlayerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, player_id: int) -> Optional[Player]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT player_id, full_name, jersey_number, is_active FROM players WHERE player_id=%s",
                (int(player_id),),
            )
            r = fetchone(cur)
            return _to_player(r) if r else None

    def list_players(self, *, active_only: bool = False) -> Sequence[Player]:
        where = "WHERE is_active=1" if active_only else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT player_id, full_name, jersey_number, is_active
                FROM players
                {where}
                ORDER BY full_name ASC
                """
            )
            return [_to_player(r) for r in fetchall(cur)]
