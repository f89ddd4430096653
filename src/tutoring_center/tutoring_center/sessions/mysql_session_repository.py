from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import bound_cursor, fetchall, fetchone, normalize_mysql_date
from .model import ClassSession
from .repository import SessionStore

logger = logging.getLogger(__name__)

_SESSION_COLUMNS = """
    session_id, course_id, course_name, session_date, start_time, end_time,
    room, teacher_name, session_number, session_notes
"""


class MySQLClassSessionRepository(SessionStore):
    def __init__(self, conn_factory: DatabaseConnection, *, cursor=None):
        self._conn_factory = conn_factory
        self._cur = cursor

    @staticmethod
    def _to_session(r: dict) -> ClassSession:
        return ClassSession(
            session_id=str(r["session_id"]),
            course_id=str(r["course_id"]),
            course_name=r.get("course_name") or "",
            session_date=normalize_mysql_date(r["session_date"]),
            start_time=r["start_time"],
            end_time=r["end_time"],
            session_number=int(r["session_number"]),
            room_name=r.get("room") or "",
            teacher_name=r.get("teacher_name") or "",
            note=r.get("session_notes"),
        )

    def delete_all(self, course_id: str) -> int:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute("DELETE FROM class_sessions WHERE course_id=%s", (course_id,))
            deleted = int(cur.rowcount or 0)
            logger.info("Deleted %d (all) sessions of course %s", deleted, course_id)
            return deleted

    def delete_future(self, course_id: str, from_date: date) -> int:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(
                "DELETE FROM class_sessions WHERE course_id=%s AND start_time >= %s",
                (course_id, datetime.combine(from_date, time.min)),
            )
            deleted = int(cur.rowcount or 0)
            logger.info("Deleted %d future sessions of course %s from %s", deleted, course_id, from_date)
            return deleted

    def create(self, session: ClassSession) -> bool:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(
                """
                INSERT INTO class_sessions(
                    session_id, course_id, course_name, start_time, session_date, end_time,
                    room, teacher_name, session_number, session_notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    session.session_id,
                    session.course_id,
                    session.course_name,
                    session.start_time,
                    session.session_date,
                    session.end_time,
                    session.room_name,
                    session.teacher_name,
                    int(session.session_number),
                    session.note,
                ),
            )
            return cur.rowcount > 0

    def find_by_course(self, course_id: str) -> Sequence[ClassSession]:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM class_sessions
                WHERE course_id=%s
                ORDER BY session_number ASC
                """,
                (course_id,),
            )
            return [self._to_session(r) for r in fetchall(cur)]

    def find_by_id(self, session_id: str) -> Optional[ClassSession]:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(f"SELECT {_SESSION_COLUMNS} FROM class_sessions WHERE session_id=%s", (session_id,))
            r = fetchone(cur)
            return self._to_session(r) if r else None

    def current_session_number(self, course_id: str, on_date: date) -> int:
        with bound_cursor(self._conn_factory, self._cur) as cur:
            cur.execute(
                """
                SELECT MAX(session_number) AS current_number
                FROM class_sessions
                WHERE course_id=%s AND session_date <= %s
                """,
                (course_id, on_date),
            )
            r = fetchone(cur)
            if not r or r["current_number"] is None:
                return 0
            return int(r["current_number"])
