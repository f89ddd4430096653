from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.tutoring_center.tutoring_center.core.enums import Role
from src.tutoring_center.tutoring_center.core.exceptions import AuthorizationError, ValidationError
from src.tutoring_center.tutoring_center.courses.service import CourseScheduleService
from src.tutoring_center.tutoring_center.sessions.model import ClassSession, session_id_for


class FakeSessionsRepo:
    def __init__(self, sessions):
        self._sessions = list(sessions)

    def find_by_id(self, session_id):
        return next((s for s in self._sessions if s.session_id == session_id), None)

    def find_by_course(self, course_id):
        return [s for s in self._sessions if s.course_id == course_id]

    def current_session_number(self, course_id, on_date):
        return max((s.session_number for s in self.find_by_course(course_id) if s.session_date <= on_date), default=0)


class FakeCoordinator:
    def __init__(self):
        self.scheduled: list[str] = []
        self.ended: list[tuple[str, date]] = []

    def end_course_early(self, course_id, from_date):
        self.ended.append((course_id, from_date))
        return course_id

    def schedule_course(self, course_id):
        self.scheduled.append(course_id)
        return course_id


def make_session(number: int, day: date) -> ClassSession:
    return ClassSession(
        session_id=session_id_for("ENG-101", day, number),
        course_id="ENG-101",
        course_name="English Basics",
        session_date=day,
        start_time=datetime.combine(day, time(18, 0)),
        end_time=datetime.combine(day, time(19, 30)),
        session_number=number,
        room_name="Room 101",
        teacher_name="N/A",
    )


@pytest.fixture
def service():
    sessions = [
        make_session(1, date(2024, 1, 1)),
        make_session(2, date(2024, 1, 3)),
        make_session(3, date(2024, 1, 8)),
        make_session(4, date(2024, 1, 10)),
    ]
    return CourseScheduleService(FakeCoordinator(), FakeSessionsRepo(sessions))


def test_only_admin_can_schedule_course(service):
    with pytest.raises(AuthorizationError):
        service.schedule_course(current_role=Role.TEACHER, course_id="ENG-101")

    assert service.schedule_course(current_role=Role.ADMIN, course_id=" ENG-101 ") == "ENG-101"


def test_blank_course_id_is_rejected(service):
    with pytest.raises(ValidationError):
        service.list_sessions(course_id="  ")


def test_progress_counts_sessions_held_so_far(service):
    progress = service.progress(course_id="ENG-101", on_date=date(2024, 1, 5))

    assert progress.completed_sessions == 2
    assert progress.total_sessions == 4
    assert progress.percent == 50.0


def test_progress_before_start_and_for_unknown_course(service):
    assert service.progress(course_id="ENG-101", on_date=date(2023, 12, 31)).completed_sessions == 0
    assert service.progress(course_id="MATH-1", on_date=date(2024, 1, 5)).percent == 0.0


def test_only_admin_can_end_course_early(service):
    with pytest.raises(AuthorizationError):
        service.end_course_early(current_role=Role.STAFF, course_id="ENG-101", from_date=date(2024, 1, 8))

    service.end_course_early(current_role=Role.ADMIN, course_id="ENG-101", from_date=date(2024, 1, 8))


def test_get_session_by_id(service):
    session_id = session_id_for("ENG-101", date(2024, 1, 3), 2)

    assert service.get_session(session_id=session_id).session_number == 2
    with pytest.raises(ValidationError):
        service.get_session(session_id="SESS_MISSING")
