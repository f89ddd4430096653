from __future__ import annotations

import logging

from ..courses.mysql_course_repository import MySQLCourseRepository
from ..database.connection import DatabaseConnection
from ..sessions.mysql_session_repository import MySQLClassSessionRepository
from .unit_of_work import ScheduleUnitOfWork

logger = logging.getLogger(__name__)


class MySQLScheduleUnitOfWork(ScheduleUnitOfWork):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._conn = None
        self._cur = None

    def __enter__(self) -> "MySQLScheduleUnitOfWork":
        self._conn = self._conn_factory.connect()
        self._cur = self._conn.cursor(dictionary=True)
        self.sessions = MySQLClassSessionRepository(self._conn_factory, cursor=self._cur)
        self.courses = MySQLCourseRepository(self._conn_factory, cursor=self._cur)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                logger.warning("Rolling back schedule transaction: %s", exc)
                self._conn.rollback()
        finally:
            self._cur.close()
            self._conn.close()
            self._cur = None
            self._conn = None
        return False
