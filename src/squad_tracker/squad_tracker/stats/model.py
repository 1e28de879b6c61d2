from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceStat:
    """Per-player attendance over a window. ``rate`` is present / total."""

    player_id: int
    full_name: str
    present: int = 0
    late: int = 0
    absent: int = 0
    excused: int = 0
    total: int = 0
    rate: float = 0.0


@dataclass(frozen=True)
class CompetitionStat:
    gold: int = 0
    silver: int = 0
    bronze: int = 0
    none: int = 0
    total_wins: int = 0
    total_matches: int = 0
    win_rate: Optional[float] = None

    @classmethod
    def empty(cls) -> "CompetitionStat":
        return cls()


@dataclass(frozen=True)
class TeamStat:
    attendance_rate: float = 0.0
    total_sessions: int = 0
    avg_attendance_per_session: float = 0.0

    @classmethod
    def empty(cls) -> "TeamStat":
        return cls()


@dataclass(frozen=True)
class StatusBreakdown:
    """Status counts; ``session_date`` is set when it describes a single session."""

    present: int = 0
    late: int = 0
    absent: int = 0
    excused: int = 0
    session_date: Optional[date] = None


@dataclass(frozen=True)
class TrendPoint:
    label: str
    rate: float


@dataclass(frozen=True)
class Leaderboard:
    top: list[AttendanceStat] = field(default_factory=list)
    bottom: list[AttendanceStat] = field(default_factory=list)


@dataclass(frozen=True)
class CoachStat:
    coach_id: int
    full_name: str
    total_sessions: int = 0
    attendance_rate: float = 0.0
