from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..competitions.model import Competition, CompetitionResult
from ..sessions.model import AttendanceRecord, Session


class RecordSupplier(Protocol):
    """Read-only access to the raw records behind every statistic.

    Lookups for an unknown window or unknown ids return an empty sequence
    instead of raising.
    """

    def list_sessions_in_window(self, window_id: int) -> Sequence[Session]:
        """Sessions dated inside the window, ascending by date."""

        raise NotImplementedError

    def list_competitions_in_window(self, window_id: int) -> Sequence[Competition]:
        """Competitions dated inside the window with their results attached, ascending by date."""

        raise NotImplementedError

    def list_attendance_records(self, session_ids: Iterable[int]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_competition_results(
        self,
        *,
        player_id: Optional[int] = None,
        competition_ids: Optional[Iterable[int]] = None,
    ) -> Sequence[CompetitionResult]:
        raise NotImplementedError
