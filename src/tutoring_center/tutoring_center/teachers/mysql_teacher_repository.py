from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Teacher
from .repository import TeacherLookup


class MySQLTeacherRepository(TeacherLookup):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT teacher_id, full_name FROM teachers WHERE teacher_id=%s", (teacher_id,))
            r = fetchone(cur)
            if not r:
                return None
            return Teacher(teacher_id=str(r["teacher_id"]), full_name=r["full_name"])
