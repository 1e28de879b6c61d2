from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Coach


class CoachRepository(Protocol):
    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        raise NotImplementedError

    def list_session_ids(self, coach_id: int) -> Sequence[int]:
        """Ids of every session the coach was present at, any date."""

        raise NotImplementedError
