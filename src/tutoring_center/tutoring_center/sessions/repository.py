from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ClassSession


class SessionStore(Protocol):
    def delete_all(self, course_id: str) -> int:
        raise NotImplementedError

    def delete_future(self, course_id: str, from_date: date) -> int:
        """Delete sessions of a course starting on or after `from_date`."""

        raise NotImplementedError

    def create(self, session: ClassSession) -> bool:
        raise NotImplementedError

    def find_by_course(self, course_id: str) -> Sequence[ClassSession]:
        """Sessions of a course ordered by session number."""

        raise NotImplementedError

    def find_by_id(self, session_id: str) -> Optional[ClassSession]:
        raise NotImplementedError

    def current_session_number(self, course_id: str, on_date: date) -> int:
        """Highest session number held on or before `on_date` (0 if none)."""

        raise NotImplementedError
