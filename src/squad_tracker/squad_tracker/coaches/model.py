from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coach:
    coach_id: int
    full_name: str
    role_title: Optional[str] = None
    is_active: bool = True
