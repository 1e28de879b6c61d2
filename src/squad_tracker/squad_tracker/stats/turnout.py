from __future__ import annotations

from typing import Iterable

from ..common.numbers import safe_ratio
from ..core.enums import AttendanceStatus


def calc_turnout(statuses: Iterable[AttendanceStatus | str]) -> float:
    """Share of PRESENT statuses in one session, in [0, 1]. Empty input gives 0."""

    total = 0
    present = 0
    for status in statuses:
        total += 1
        if AttendanceStatus.normalize(status) is AttendanceStatus.PRESENT:
            present += 1
    return safe_ratio(present, total)
