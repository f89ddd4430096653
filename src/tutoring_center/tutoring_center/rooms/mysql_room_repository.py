from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Classroom
from .repository import RoomLookup


class MySQLRoomRepository(RoomLookup):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, room_id: str) -> Optional[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT room_id, room_name FROM classrooms WHERE room_id=%s", (room_id,))
            r = fetchone(cur)
            if not r:
                return None
            return Classroom(room_id=str(r["room_id"]), room_name=r["room_name"])
