from __future__ import annotations

import logging
from typing import Optional

from ..coaches.repository import CoachRepository
from ..common.numbers import safe_ratio
from ..core.enums import AttendanceStatus
from ..records.repository import RecordSupplier
from .model import CoachStat

logger = logging.getLogger(__name__)


class CoachStatsService:
    """Player attendance at the sessions a coach ran."""

    def __init__(self, records: RecordSupplier, coaches: CoachRepository):
        self._records = records
        self._coaches = coaches

    def coach_stat(self, coach_id: int, window_id: int) -> Optional[CoachStat]:
        """None for an unknown coach; zeroed stat when the coach has no sessions in the window."""

        coach = self._coaches.get_by_id(coach_id)
        if not coach:
            return None

        coached = set(self._coaches.list_session_ids(coach_id))
        session_ids = [s.session_id for s in self._records.list_sessions_in_window(window_id) if s.session_id in coached]
        if not session_ids:
            return CoachStat(coach_id=coach.coach_id, full_name=coach.full_name)

        records = self._records.list_attendance_records(session_ids)
        present = sum(1 for r in records if AttendanceStatus.normalize(r.status) is AttendanceStatus.PRESENT)
        logger.debug("Coach %s: %d sessions in window %s", coach_id, len(session_ids), window_id)

        return CoachStat(
            coach_id=coach.coach_id,
            full_name=coach.full_name,
            total_sessions=len(session_ids),
            attendance_rate=safe_ratio(present, len(records)),
        )
