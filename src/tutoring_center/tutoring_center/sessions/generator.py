"""Materialize a course's weekly recurrence into concrete class sessions."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, List, Optional, Set

from ..common.datetime_utils import add_years, parse_weekday
from ..core.constants import DEFAULT_SCHEDULE_HORIZON_YEARS, UNRESOLVED_NAME
from ..courses.model import Course
from ..rooms.repository import RoomLookup
from ..teachers.repository import TeacherLookup
from .model import ClassSession, session_id_for

logger = logging.getLogger(__name__)

HolidayCheck = Callable[[date], bool]


def _never_holiday(_: date) -> bool:
    return False


class SessionGenerator:
    """Turns a course's recurrence parameters into an ordered session list.

    The only side effects are the room/teacher lookups (once per call) and the
    `holiday_check` callback (once per candidate date). Invalid input yields an
    empty list, an unreachable target yields a shortfall; neither raises.
    """

    def __init__(
        self,
        rooms: RoomLookup | None = None,
        teachers: TeacherLookup | None = None,
        *,
        horizon_years: int = DEFAULT_SCHEDULE_HORIZON_YEARS,
    ):
        self._rooms = rooms
        self._teachers = teachers
        self._horizon_years = int(horizon_years)

    @staticmethod
    def _is_schedulable(course: Course) -> bool:
        return bool(
            course.course_id
            and course.start_date is not None
            and course.start_time is not None
            and course.end_time is not None
            and course.days_of_week
            and course.total_sessions > 0
        )

    def _room_name(self, course: Course) -> str:
        if self._rooms is None or not (course.room_id or "").strip():
            return UNRESOLVED_NAME
        room = self._rooms.get_by_id(course.room_id)
        if room is None or not room.room_name:
            logger.warning("Room %s of course %s not found", course.room_id, course.course_id)
            return UNRESOLVED_NAME
        return room.room_name

    def _teacher_name(self, course: Course) -> str:
        if self._teachers is None or not (course.teacher_id or "").strip():
            return UNRESOLVED_NAME
        teacher = self._teachers.get_by_id(course.teacher_id)
        if teacher is None or not teacher.full_name:
            logger.warning("Teacher %s of course %s not found", course.teacher_id, course.course_id)
            return UNRESOLVED_NAME
        return teacher.full_name

    @staticmethod
    def _weekdays(course: Course) -> Set[int]:
        weekdays: Set[int] = set()
        for token in course.days_of_week:
            weekday = parse_weekday(token)
            if weekday is None:
                logger.error("Skipping invalid day %r in schedule of course %s", token, course.course_id)
                continue
            weekdays.add(weekday)
        return weekdays

    def horizon_for(self, start_date: date) -> date:
        return add_years(start_date, self._horizon_years)

    def generate(self, course: Course, holiday_check: Optional[HolidayCheck] = None) -> List[ClassSession]:
        if not self._is_schedulable(course):
            logger.warning(
                "Course %s is missing schedule fields (start date, time window, days, target count); "
                "no sessions generated",
                course.course_id,
            )
            return []

        is_holiday = holiday_check or _never_holiday
        room_name = self._room_name(course)
        teacher_name = self._teacher_name(course)

        weekdays = self._weekdays(course)
        if not weekdays:
            logger.warning("Course %s has no valid schedule days; no sessions generated", course.course_id)
            return []

        horizon = self.horizon_for(course.start_date)
        sessions: List[ClassSession] = []
        current = course.start_date

        while len(sessions) < course.total_sessions and current <= horizon:
            if current.weekday() in weekdays:
                if is_holiday(current):
                    logger.debug("Skipping %s for course %s: holiday", current, course.course_id)
                else:
                    number = len(sessions) + 1
                    sessions.append(
                        ClassSession(
                            session_id=session_id_for(course.course_id, current, number),
                            course_id=course.course_id,
                            course_name=course.course_name,
                            session_date=current,
                            start_time=datetime.combine(current, course.start_time),
                            end_time=datetime.combine(current, course.end_time),
                            session_number=number,
                            room_name=room_name,
                            teacher_name=teacher_name,
                        )
                    )
            current += timedelta(days=1)

        if len(sessions) < course.total_sessions:
            logger.warning(
                "Course %s: only %d of %d sessions fit before %s",
                course.course_id,
                len(sessions),
                course.total_sessions,
                horizon,
            )
        else:
            logger.info("Generated %d sessions for course %s", len(sessions), course.course_id)
        return sessions
