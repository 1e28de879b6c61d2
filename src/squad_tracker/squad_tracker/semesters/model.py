from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import as_date


@dataclass(frozen=True)
class Semester:
    """Reporting window; both ends are inclusive."""

    semester_id: int
    name: str
    start_date: date
    end_date: date
    is_active: bool = False

    def contains(self, value: date | datetime) -> bool:
        return self.start_date <= as_date(value) <= self.end_date
