from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Course


class CourseStore(Protocol):
    def get_by_id(self, course_id: str) -> Optional[Course]:
        raise NotImplementedError

    def find_ending_on_or_after(self, on_or_after: date) -> Sequence[Course]:
        """Courses whose end date is NULL or not before `on_or_after`, ordered by id."""

        raise NotImplementedError

    def update_end_date(self, course_id: str, end_date: Optional[date]) -> bool:
        raise NotImplementedError

    def update_total_sessions(self, course_id: str, total_sessions: int) -> bool:
        raise NotImplementedError
