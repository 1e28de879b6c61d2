from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Session:
    """Domain entity: one training session on the team calendar."""

    session_id: int
    session_date: date
    session_type: str
    location: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one player's attendance at one session.

    At most one record exists per (session_id, player_id).
    """

    record_id: int
    session_id: int
    player_id: int
    status: AttendanceStatus
    player_name: str = ""
    note: Optional[str] = None
