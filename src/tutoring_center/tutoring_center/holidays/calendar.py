"""Read-through holiday cache with write invalidation and a daily expiry sweep."""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_color_hex, require_date_range, require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_HOLIDAY_CACHE_TTL_MINUTES, DEFAULT_HOLIDAY_COLOR, SYSTEM_ACTOR
from ..core.exceptions import ValidationError
from .model import Holiday, HolidayHistory
from .repository import HistoryLog, HolidayStore

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """Answers holiday queries for the scheduler and owns holiday writes.

    Query results are memoized per input. The whole cache is dropped right
    after every successful write made through this instance, and lazily on the
    next query once `ttl_minutes` have passed since the last drop. The first
    query of each calendar day also deletes holidays that ended before today.
    """

    def __init__(
        self,
        holidays: HolidayStore,
        history: HistoryLog,
        *,
        ttl_minutes: int = DEFAULT_HOLIDAY_CACHE_TTL_MINUTES,
        clock: Callable[[], datetime] = now_local,
    ):
        self._holidays = holidays
        self._history = history
        self._ttl = timedelta(minutes=int(ttl_minutes))
        self._clock = clock
        self._lock = threading.RLock()

        self._status: Dict[date, bool] = {}
        self._covering: Dict[date, Optional[Holiday]] = {}
        self._by_id: Dict[int, Holiday] = {}
        self._by_year: Dict[int, List[Holiday]] = {}
        self._all: Optional[List[Holiday]] = None

        self._last_invalidated = self._clock()
        self._last_swept: Optional[date] = None

    # -- cache housekeeping -------------------------------------------------

    def invalidate(self) -> None:
        with self._lock:
            self._status.clear()
            self._covering.clear()
            self._by_id.clear()
            self._by_year.clear()
            self._all = None
            self._last_invalidated = self._clock()

    def _invalidate_if_stale(self) -> None:
        if self._clock() - self._last_invalidated > self._ttl:
            logger.debug("Holiday cache older than %s; dropping it", self._ttl)
            self.invalidate()

    def sweep_expired(self) -> int:
        """Delete holidays that ended before today; runs at most once per day.

        Returns the number of deleted holidays. A failure is logged and the
        sweep is retried on the next query.
        """
        today = self._clock().date()
        with self._lock:
            if self._last_swept == today:
                return 0
            try:
                expired = list(self._holidays.find_expired_before(today))
                if not expired:
                    logger.debug("No expired holidays before %s", today)
                    self._last_swept = today
                    return 0
                deleted = self._holidays.delete_expired_before(today)
            except Exception:
                logger.exception("Error removing expired holidays")
                return 0

            self._last_swept = today
            self.invalidate()
            logger.info("Removed %d expired holidays", deleted)

            stamp = self._clock()
            try:
                for holiday in expired:
                    self._history.append(SYSTEM_ACTOR, f"Deleted expired holiday: {holiday.describe()}", stamp)
            except Exception:
                logger.exception("Error logging expired holiday deletions")
            return deleted

    def _before_query(self) -> None:
        self.sweep_expired()
        self._invalidate_if_stale()

    # -- queries ------------------------------------------------------------

    def is_holiday(self, day: date) -> bool:
        with self._lock:
            self._before_query()
            if day not in self._status:
                self._status[day] = bool(self._holidays.exists_on(day))
            return self._status[day]

    def holiday_covering(self, day: date) -> Optional[Holiday]:
        with self._lock:
            self._before_query()
            if day not in self._covering:
                self._covering[day] = self._holidays.find_covering(day)
            return self._covering[day]

    def get(self, holiday_id: int) -> Optional[Holiday]:
        with self._lock:
            self._before_query()
            holiday_id = int(holiday_id)
            if holiday_id not in self._by_id:
                holiday = self._holidays.get_by_id(holiday_id)
                if holiday is None:
                    return None
                self._by_id[holiday_id] = holiday
            return self._by_id[holiday_id]

    def list_by_year(self, year: int) -> List[Holiday]:
        with self._lock:
            self._before_query()
            year = int(year)
            if year not in self._by_year:
                self._by_year[year] = list(self._holidays.find_by_year(year))
            return list(self._by_year[year])

    def list_all(self) -> List[Holiday]:
        with self._lock:
            self._before_query()
            if self._all is None:
                self._all = list(self._holidays.list_all())
            return list(self._all)

    def recent_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[HolidayHistory]:
        if int(limit) <= 0:
            logger.warning("Requested holiday history with non-positive limit %s", limit)
            return []
        return self._history.list_recent(int(limit))

    # -- writes -------------------------------------------------------------

    @staticmethod
    def _validated(holiday: Holiday) -> Holiday:
        name = require_non_empty(holiday.name, "Holiday name")
        require_date_range(holiday.start_date, holiday.end_date, field_name="Holiday")
        color = require_color_hex(holiday.color_hex) if holiday.color_hex else DEFAULT_HOLIDAY_COLOR
        return Holiday(
            holiday_id=holiday.holiday_id,
            name=name,
            start_date=holiday.start_date,
            end_date=holiday.end_date,
            color_hex=color,
        )

    def add(self, holiday: Holiday, *, actor: str = SYSTEM_ACTOR) -> Holiday:
        holiday = self._validated(holiday)
        with self._lock:
            saved = self._holidays.create(holiday)
            try:
                self._history.append(actor, f"Created holiday: {saved.describe()}", self._clock())
            finally:
                self.invalidate()
        logger.info("Added holiday %s", saved.describe())
        return saved

    def update(self, holiday: Holiday, *, actor: str = SYSTEM_ACTOR) -> Optional[Holiday]:
        if holiday.holiday_id is None:
            raise ValidationError("Holiday id is required for an update")
        holiday = self._validated(holiday)
        with self._lock:
            if self._holidays.get_by_id(int(holiday.holiday_id)) is None:
                logger.warning("Holiday %s not found for update", holiday.holiday_id)
                return None
            # Re-saving identical values matches the row without changing it.
            if not self._holidays.update(holiday):
                logger.info("Holiday %s saved without changes", holiday.holiday_id)
            try:
                self._history.append(actor, f"Updated holiday: {holiday.describe()}", self._clock())
            finally:
                self.invalidate()
        logger.info("Updated holiday %s", holiday.describe())
        return holiday

    def remove(self, holiday_id: int, *, actor: str = SYSTEM_ACTOR) -> bool:
        with self._lock:
            existing = self._holidays.get_by_id(int(holiday_id))
            if existing is None:
                logger.warning("Holiday %s not found for deletion", holiday_id)
                return False
            if not self._holidays.delete(int(holiday_id)):
                return False
            try:
                self._history.append(
                    actor, f"Deleted holiday: {existing.name} (ID: {existing.holiday_id})", self._clock()
                )
            finally:
                self.invalidate()
        logger.info("Deleted holiday %s", existing.describe())
        return True
