from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Player


class PlayerRepository(Protocol):
    def get_by_id(self, player_id: int) -> Optional[Player]:
        raise NotImplementedError

    def list_players(self, *, active_only: bool = False) -> Sequence[Player]:
        """Players ordered by name."""

        raise NotImplementedError
