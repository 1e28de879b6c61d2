from __future__ import annotations

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class AttendanceStatus(str, Enum):
    """Attendance status of one player at one session.

    ``UNKNOWN`` is never stored on purpose; it marks a stored value that did not
    match any known status. Such records still count toward totals.
    """

    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"
    EXCUSED = "EXCUSED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def normalize(cls, value: Any) -> "AttendanceStatus":
        if isinstance(value, cls):
            return value
        try:
            status = cls(value)
        except ValueError:
            logger.warning("Unrecognized attendance status %r, treating as UNKNOWN", value)
            return cls.UNKNOWN
        return status


class Medal(str, Enum):
    """Medal won by a player at a competition."""

    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    NONE = "NONE"

    @classmethod
    def normalize(cls, value: Any) -> "Medal":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            if value is not None:
                logger.warning("Unrecognized medal %r, treating as NONE", value)
            return cls.NONE
