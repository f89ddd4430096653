from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import weekday_token
from ..database.connection import DatabaseConnection
from ..database.mysql_base import bound_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_time
from .model import Course
from .repository import CourseStore

logger = logging.getLogger(__name__)

_COURSE_COLUMNS = """
    course_id, course_name, subject, start_date, end_date,
    start_time, end_time, teacher_id, room_id, total_sessions
"""


class MySQLCourseRepository(CourseStore):
    def __init__(self, conn_factory: DatabaseConnection, *, cursor=None):
        self._conn_factory = conn_factory
        self._cur = cursor

    def _load_days(self, cur, course_ids: Sequence[str]) -> Dict[str, List[str]]:
        days: Dict[str, List[str]] = defaultdict(list)
        if not course_ids:
            return days
        placeholders = ", ".join(["%s"] * len(course_ids))
        cur.execute(
            f"""
            SELECT course_id, day_of_week_numeric
            FROM course_schedule_days
            WHERE course_id IN ({placeholders})
            ORDER BY course_id ASC, day_of_week_numeric ASC
            """,
            tuple(course_ids),
        )
        for r in fetchall(cur):
            numeric = int(r["day_of_week_numeric"])
            # Stored as ISO weekday: 1=Mon .. 7=Sun.
            if 1 <= numeric <= 7:
                days[str(r["course_id"])].append(weekday_token(numeric - 1))
            else:
                logger.warning("Ignoring invalid schedule day %s for course %s", numeric, r["course_id"])
        return days

    @staticmethod
    def _to_course(r: dict, days: List[str]) -> Course:
        return Course(
            course_id=str(r["course_id"]),
            course_name=r.get("course_name") or "",
            subject=r.get("subject"),
            start_date=normalize_mysql_date(r.get("start_date")),
            end_date=normalize_mysql_date(r.get("end_date")),
            start_time=normalize_mysql_time(r.get("start_time")),
            end_time=normalize_mysql_time(r.get("end_time")),
            teacher_id=r.get("teacher_id"),
            room_id=r.get("room_id"),
            total_sessions=int(r.get("total_sessions") or 0),
            days_of_week=tuple(days),
        )

    def get_by_id(self, course_id: str) -> Optional[Course]:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(f"SELECT {_COURSE_COLUMNS} FROM courses WHERE course_id=%s", (course_id,))
            r = fetchone(cur)
            if not r:
                return None
            days = self._load_days(cur, [str(r["course_id"])])
            return self._to_course(r, days.get(str(r["course_id"]), []))

    def find_ending_on_or_after(self, on_or_after: date) -> Sequence[Course]:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(
                f"""
                SELECT {_COURSE_COLUMNS}
                FROM courses
                WHERE end_date IS NULL OR end_date >= %s
                ORDER BY course_id ASC
                """,
                (on_or_after,),
            )
            rows = fetchall(cur)
            days = self._load_days(cur, [str(r["course_id"]) for r in rows])
            return [self._to_course(r, days.get(str(r["course_id"]), [])) for r in rows]

    def update_end_date(self, course_id: str, end_date: Optional[date]) -> bool:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute("UPDATE courses SET end_date=%s WHERE course_id=%s", (end_date, course_id))
            if cur.rowcount > 0:
                logger.info("Updated end_date of course %s to %s", course_id, end_date)
                return True
            logger.warning("Course %s not found or end_date unchanged", course_id)
            return False

    def update_total_sessions(self, course_id: str, total_sessions: int) -> bool:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute("UPDATE courses SET total_sessions=%s WHERE course_id=%s", (int(total_sessions), course_id))
            if cur.rowcount > 0:
                logger.info("Updated total_sessions of course %s to %d", course_id, total_sessions)
                return True
            logger.warning("Course %s not found for total_sessions update", course_id)
            return False
