from __future__ import annotations

import logging
from datetime import date
from typing import List, Tuple

from ..common.validators import require_date_range
from ..core.enums import RescheduleGranularity
from ..core.exceptions import RescheduleError, ValidationError
from ..courses.model import Course
from ..holidays.calendar import HolidayCalendar
from ..sessions.generator import SessionGenerator
from .model import CourseOutcome, RescheduleReport
from .unit_of_work import ScheduleUnitOfWork, UnitOfWorkFactory

logger = logging.getLogger(__name__)


class RescheduleCoordinator:
    """Regenerates course schedules after holiday changes.

    With BATCH granularity the whole cascade is one unit of work: a course
    that ends up with no sessions, or any store error, rolls back every course
    and the error propagates. With PER_COURSE each course commits on its own
    and failures are collected in the report.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkFactory,
        generator: SessionGenerator,
        calendar: HolidayCalendar,
        *,
        granularity: RescheduleGranularity = RescheduleGranularity.BATCH,
    ):
        self._uow = unit_of_work
        self._generator = generator
        self._calendar = calendar
        self._granularity = RescheduleGranularity(granularity)

    @property
    def granularity(self) -> RescheduleGranularity:
        return self._granularity

    def _regenerate(self, uow: ScheduleUnitOfWork, course: Course) -> CourseOutcome:
        logger.info("Rescheduling course %s - %s", course.course_id, course.course_name)

        deleted = uow.sessions.delete_all(course.course_id)
        sessions = self._generator.generate(course, self._calendar.is_holiday)
        if not sessions:
            raise RescheduleError(
                f"No sessions could be generated for course {course.course_id}; cannot derive its end date",
                course_id=course.course_id,
            )

        for session in sessions:
            if not uow.sessions.create(session):
                raise RescheduleError(
                    f"Could not save session {session.session_id} of course {course.course_id}",
                    course_id=course.course_id,
                )

        new_end_date = sessions[-1].session_date
        if course.end_date != new_end_date:
            logger.info("Course %s end date %s -> %s", course.course_id, course.end_date, new_end_date)
            uow.courses.update_end_date(course.course_id, new_end_date)
        else:
            logger.info("Course %s end date unchanged (%s)", course.course_id, new_end_date)

        return CourseOutcome(
            course_id=course.course_id,
            target_sessions=course.total_sessions,
            generated_sessions=len(sessions),
            deleted_sessions=int(deleted),
            old_end_date=course.end_date,
            new_end_date=new_end_date,
        )

    def schedule_course(self, course_id: str) -> CourseOutcome:
        """(Re)build one course's sessions, e.g. right after it is created."""
        with self._uow() as uow:
            course = uow.courses.get_by_id(course_id)
            if course is None:
                raise ValidationError(f"Course {course_id} does not exist")
            return self._regenerate(uow, course)

    def end_course_early(self, course_id: str, from_date: date) -> CourseOutcome:
        """Drop a course's sessions from `from_date` on; the end date follows the last one kept."""
        with self._uow() as uow:
            course = uow.courses.get_by_id(course_id)
            if course is None:
                raise ValidationError(f"Course {course_id} does not exist")

            deleted = uow.sessions.delete_future(course_id, from_date)
            remaining = uow.sessions.find_by_course(course_id)
            new_end_date = remaining[-1].session_date if remaining else None
            if course.end_date != new_end_date:
                uow.courses.update_end_date(course_id, new_end_date)
            # Later cascades regenerate only the kept sessions.
            if course.total_sessions != len(remaining):
                uow.courses.update_total_sessions(course_id, len(remaining))
            logger.info("Course %s ends early: %d sessions dropped from %s", course_id, deleted, from_date)

            return CourseOutcome(
                course_id=course_id,
                target_sessions=len(remaining),
                generated_sessions=len(remaining),
                deleted_sessions=int(deleted),
                old_end_date=course.end_date,
                new_end_date=new_end_date,
            )

    @staticmethod
    def _affected_courses(uow: ScheduleUnitOfWork, range_start: date) -> List[Course]:
        courses = []
        for course in uow.courses.find_ending_on_or_after(range_start):
            if course.total_sessions <= 0:
                logger.info("Skipping course %s: no sessions to schedule", course.course_id)
                continue
            courses.append(course)
        return courses

    def reschedule_after(self, range_start: date, range_end: date) -> RescheduleReport:
        require_date_range(range_start, range_end, field_name="Affected range")
        logger.info("Rescheduling courses affected by holiday change %s - %s", range_start, range_end)

        if self._granularity is RescheduleGranularity.PER_COURSE:
            return self._reschedule_per_course(range_start, range_end)
        return self._reschedule_batch(range_start, range_end)

    def _reschedule_batch(self, range_start: date, range_end: date) -> RescheduleReport:
        try:
            with self._uow() as uow:
                courses = self._affected_courses(uow, range_start)
                if not courses:
                    logger.info("No courses need rescheduling")
                    return RescheduleReport(range_start=range_start, range_end=range_end)

                logger.info("Found %d courses to reschedule", len(courses))
                outcomes = tuple(self._regenerate(uow, course) for course in courses)
        except Exception:
            logger.exception("Rescheduling failed; rolled back changes to every affected course")
            raise

        logger.info("Rescheduled %d courses", len(outcomes))
        return RescheduleReport(range_start=range_start, range_end=range_end, outcomes=outcomes)

    def _reschedule_per_course(self, range_start: date, range_end: date) -> RescheduleReport:
        with self._uow() as uow:
            courses = self._affected_courses(uow, range_start)
        if not courses:
            logger.info("No courses need rescheduling")
            return RescheduleReport(range_start=range_start, range_end=range_end)

        outcomes: List[CourseOutcome] = []
        failed: List[Tuple[str, str]] = []
        for course in courses:
            try:
                with self._uow() as uow:
                    outcomes.append(self._regenerate(uow, course))
            except Exception as e:
                logger.exception("Rescheduling course %s failed; its changes were rolled back", course.course_id)
                failed.append((course.course_id, str(e)))

        logger.info("Rescheduled %d courses, %d failed", len(outcomes), len(failed))
        return RescheduleReport(
            range_start=range_start,
            range_end=range_end,
            outcomes=tuple(outcomes),
            failed=tuple(failed),
        )
