from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def short_label(value: date | datetime) -> str:
    """Chart label such as ``Jan 5``."""
    return f"{value.strftime('%b')} {value.day}"


def iso_or_none(value: Optional[date | datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_date(value).strftime("%Y-%m-%d")
