from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Semester


class SemesterRepository(Protocol):
    def list_all(self) -> Sequence[Semester]:
        """All semesters, most recent start date first."""

        raise NotImplementedError

    def get_by_id(self, semester_id: int) -> Optional[Semester]:
        raise NotImplementedError

    def get_active(self) -> Optional[Semester]:
        raise NotImplementedError
