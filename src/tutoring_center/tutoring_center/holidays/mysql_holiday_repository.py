from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Holiday
from .repository import HolidayStore

_HOLIDAY_COLUMNS = "id, name, start_date, end_date, color_hex"


class MySQLHolidayRepository(HolidayStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_holiday(r: dict) -> Holiday:
        return Holiday(
            holiday_id=int(r["id"]),
            name=r["name"],
            start_date=normalize_mysql_date(r["start_date"]),
            end_date=normalize_mysql_date(r["end_date"]),
            color_hex=r.get("color_hex") or "",
        )

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_HOLIDAY_COLUMNS} FROM holidays WHERE id=%s", (int(holiday_id),))
            r = fetchone(cur)
            return self._to_holiday(r) if r else None

    def exists_on(self, day: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS hit FROM holidays WHERE %s BETWEEN start_date AND end_date LIMIT 1", (day,))
            return fetchone(cur) is not None

    def find_covering(self, day: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_HOLIDAY_COLUMNS}
                FROM holidays
                WHERE %s BETWEEN start_date AND end_date
                ORDER BY start_date ASC, id ASC
                LIMIT 1
                """,
                (day,),
            )
            r = fetchone(cur)
            return self._to_holiday(r) if r else None

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_HOLIDAY_COLUMNS} FROM holidays ORDER BY start_date ASC, id ASC")
            return [self._to_holiday(r) for r in fetchall(cur)]

    def find_by_year(self, year: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_HOLIDAY_COLUMNS}
                FROM holidays
                WHERE start_date <= %s AND end_date >= %s
                ORDER BY start_date ASC, id ASC
                """,
                (date(year, 12, 31), date(year, 1, 1)),
            )
            return [self._to_holiday(r) for r in fetchall(cur)]

    def find_expired_before(self, day: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_HOLIDAY_COLUMNS} FROM holidays WHERE end_date < %s ORDER BY end_date ASC, id ASC",
                (day,),
            )
            return [self._to_holiday(r) for r in fetchall(cur)]

    def create(self, holiday: Holiday) -> Holiday:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO holidays(name, start_date, end_date, color_hex) VALUES(%s,%s,%s,%s)",
                (holiday.name, holiday.start_date, holiday.end_date, holiday.color_hex),
            )
            if not cur.lastrowid:
                raise RuntimeError(f"Creating holiday {holiday.name!r} returned no id")
            return Holiday(
                holiday_id=int(cur.lastrowid),
                name=holiday.name,
                start_date=holiday.start_date,
                end_date=holiday.end_date,
                color_hex=holiday.color_hex,
            )

    def update(self, holiday: Holiday) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE holidays SET name=%s, start_date=%s, end_date=%s, color_hex=%s WHERE id=%s",
                (holiday.name, holiday.start_date, holiday.end_date, holiday.color_hex, int(holiday.holiday_id)),
            )
            return cur.rowcount > 0

    def delete(self, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE id=%s", (int(holiday_id),))
            return cur.rowcount > 0

    def delete_expired_before(self, day: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE end_date < %s", (day,))
            return int(cur.rowcount or 0)
