from __future__ import annotations

import logging
from typing import Optional, Sequence

from .model import Semester
from .repository import SemesterRepository

logger = logging.getLogger(__name__)


class SemesterService:
    """Use case: pick which semester a report should cover."""

    def __init__(self, semesters: SemesterRepository):
        self._semesters = semesters

    def list_all(self) -> Sequence[Semester]:
        return self._semesters.list_all()

    def resolve(self, selected_id: Optional[int] = None) -> Optional[Semester]:
        """Selected semester, else the active one, else the most recent one.

        Defaults apply only when nothing was selected: an unknown ``selected_id``
        resolves to None so reports show zeroed statistics, never another
        semester's numbers. Also None when no semester is configured at all.
        """

        if selected_id is not None:
            semester = self._semesters.get_by_id(selected_id)
            if semester is None:
                logger.info("Semester %s not found", selected_id)
            return semester

        active = self._semesters.get_active()
        if active:
            return active

        all_semesters = self._semesters.list_all()
        return all_semesters[0] if all_semesters else None
