from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Holiday, HolidayHistory


class HolidayStore(Protocol):
    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        raise NotImplementedError

    def exists_on(self, day: date) -> bool:
        raise NotImplementedError

    def find_covering(self, day: date) -> Optional[Holiday]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def find_by_year(self, year: int) -> Sequence[Holiday]:
        """Holidays whose range intersects the calendar year."""

        raise NotImplementedError

    def find_expired_before(self, day: date) -> Sequence[Holiday]:
        raise NotImplementedError

    def create(self, holiday: Holiday) -> Holiday:
        """Insert and return the holiday with its new id."""

        raise NotImplementedError

    def update(self, holiday: Holiday) -> bool:
        raise NotImplementedError

    def delete(self, holiday_id: int) -> bool:
        raise NotImplementedError

    def delete_expired_before(self, day: date) -> int:
        raise NotImplementedError


class HistoryLog(Protocol):
    def append(self, actor: str, action: str, timestamp: datetime) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[HolidayHistory]:
        """Newest entries first."""

        raise NotImplementedError
