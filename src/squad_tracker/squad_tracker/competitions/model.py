from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import Medal


@dataclass(frozen=True)
class CompetitionResult:
    """Domain entity: one player's outcome at one competition.

    ``wins <= matches`` is expected but not validated here.
    """

    result_id: int
    competition_id: int
    player_id: int
    medal: Medal = Medal.NONE
    wins: int = 0
    matches: int = 0
    notes: Optional[str] = None


@dataclass(frozen=True)
class Competition:
    competition_id: int
    competition_date: date
    name: str
    location: Optional[str] = None
    notes: Optional[str] = None
    results: tuple[CompetitionResult, ...] = field(default_factory=tuple)
