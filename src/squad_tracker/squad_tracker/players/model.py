from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Player:
    player_id: int
    full_name: str
    jersey_number: Optional[int] = None
    is_active: bool = True
