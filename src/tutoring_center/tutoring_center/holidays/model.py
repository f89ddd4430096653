from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import DEFAULT_HOLIDAY_COLOR


@dataclass(frozen=True)
class Holiday:
    holiday_id: Optional[int]
    name: str
    start_date: date
    end_date: date
    color_hex: str = DEFAULT_HOLIDAY_COLOR

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def overlaps_year(self, year: int) -> bool:
        return self.start_date <= date(year, 12, 31) and self.end_date >= date(year, 1, 1)

    def describe(self) -> str:
        return f"{self.name} (ID: {self.holiday_id}, {self.start_date} - {self.end_date})"


@dataclass(frozen=True)
class HolidayHistory:
    history_id: int
    actor: str
    action: str
    timestamp: datetime
