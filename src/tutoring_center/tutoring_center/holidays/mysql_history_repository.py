from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import HolidayHistory
from .repository import HistoryLog


class MySQLHolidayHistoryRepository(HistoryLog):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, actor: str, action: str, timestamp: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO holiday_history(actor, action, timestamp) VALUES(%s,%s,%s)",
                (actor, action, timestamp),
            )
            return int(cur.lastrowid or 0)

    def list_recent(self, limit: int) -> Sequence[HolidayHistory]:
        if int(limit) <= 0:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, actor, action, timestamp
                FROM holiday_history
                ORDER BY timestamp DESC, id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                HolidayHistory(
                    history_id=int(r["id"]),
                    actor=r["actor"],
                    action=r["action"],
                    timestamp=r["timestamp"],
                )
                for r in fetchall(cur)
            ]
