from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..scheduling.coordinator import RescheduleCoordinator
from ..scheduling.model import CourseOutcome
from ..sessions.model import ClassSession
from ..sessions.repository import SessionStore


@dataclass(frozen=True)
class CourseProgress:
    course_id: str
    completed_sessions: int
    total_sessions: int

    @property
    def percent(self) -> float:
        if self.total_sessions <= 0:
            return 0.0
        return round(100.0 * self.completed_sessions / self.total_sessions, 1)


class CourseScheduleService:
    def __init__(self, coordinator: RescheduleCoordinator, sessions: SessionStore):
        self._coordinator = coordinator
        self._sessions = sessions

    def schedule_course(self, *, current_role: Role, course_id: str) -> CourseOutcome:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to schedule courses")
        return self._coordinator.schedule_course(require_non_empty(course_id, "Course id"))

    def end_course_early(self, *, current_role: Role, course_id: str, from_date: date) -> CourseOutcome:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to schedule courses")
        return self._coordinator.end_course_early(require_non_empty(course_id, "Course id"), from_date)

    def list_sessions(self, *, course_id: str) -> Sequence[ClassSession]:
        return self._sessions.find_by_course(require_non_empty(course_id, "Course id"))

    def get_session(self, *, session_id: str) -> ClassSession:
        session = self._sessions.find_by_id(require_non_empty(session_id, "Session id"))
        if session is None:
            raise ValidationError("Session does not exist")
        return session

    def progress(self, *, course_id: str, on_date: date) -> CourseProgress:
        course_id = require_non_empty(course_id, "Course id")
        total = len(self._sessions.find_by_course(course_id))
        current = self._sessions.current_session_number(course_id, on_date)
        return CourseProgress(course_id=course_id, completed_sessions=min(current, total), total_sessions=total)
