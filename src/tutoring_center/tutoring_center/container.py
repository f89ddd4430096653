from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_HOLIDAY_CACHE_TTL_MINUTES, DEFAULT_SCHEDULE_HORIZON_YEARS
from .core.enums import RescheduleGranularity
from .courses.service import CourseScheduleService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.calendar import HolidayCalendar
from .holidays.mysql_history_repository import MySQLHolidayHistoryRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.service import HolidayService
from .rooms.mysql_room_repository import MySQLRoomRepository
from .scheduling.coordinator import RescheduleCoordinator
from .scheduling.mysql_unit_of_work import MySQLScheduleUnitOfWork
from .sessions.generator import SessionGenerator
from .sessions.mysql_session_repository import MySQLClassSessionRepository
from .teachers.mysql_teacher_repository import MySQLTeacherRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    sessions_repo: MySQLClassSessionRepository
    holidays_repo: MySQLHolidayRepository
    history_repo: MySQLHolidayHistoryRepository
    rooms_repo: MySQLRoomRepository
    teachers_repo: MySQLTeacherRepository

    holiday_calendar: HolidayCalendar
    session_generator: SessionGenerator
    reschedule_coordinator: RescheduleCoordinator
    holiday_service: HolidayService
    course_schedule_service: CourseScheduleService


def build_container(
    *,
    db_config: dict,
    holiday_cache_ttl_minutes: int = DEFAULT_HOLIDAY_CACHE_TTL_MINUTES,
    horizon_years: int = DEFAULT_SCHEDULE_HORIZON_YEARS,
    granularity: str | RescheduleGranularity = RescheduleGranularity.BATCH,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    sessions_repo = MySQLClassSessionRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    history_repo = MySQLHolidayHistoryRepository(conn)
    rooms_repo = MySQLRoomRepository(conn)
    teachers_repo = MySQLTeacherRepository(conn)

    holiday_calendar = HolidayCalendar(holidays_repo, history_repo, ttl_minutes=holiday_cache_ttl_minutes)
    session_generator = SessionGenerator(rooms_repo, teachers_repo, horizon_years=horizon_years)
    reschedule_coordinator = RescheduleCoordinator(
        lambda: MySQLScheduleUnitOfWork(conn),
        session_generator,
        holiday_calendar,
        granularity=RescheduleGranularity(granularity),
    )
    holiday_service = HolidayService(holiday_calendar, reschedule_coordinator)
    course_schedule_service = CourseScheduleService(reschedule_coordinator, sessions_repo)

    return Container(
        conn=conn,
        sessions_repo=sessions_repo,
        holidays_repo=holidays_repo,
        history_repo=history_repo,
        rooms_repo=rooms_repo,
        teachers_repo=teachers_repo,
        holiday_calendar=holiday_calendar,
        session_generator=session_generator,
        reschedule_coordinator=reschedule_coordinator,
        holiday_service=holiday_service,
        course_schedule_service=course_schedule_service,
    )
