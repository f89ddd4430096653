from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_HOLIDAY_COLOR
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..scheduling.coordinator import RescheduleCoordinator
from ..scheduling.model import RescheduleReport
from .calendar import HolidayCalendar
from .model import Holiday, HolidayHistory


class HolidayService:
    """Admin-facing holiday actions; every change triggers a reschedule.

    The holiday write commits first. If the reschedule that follows fails, the
    holiday stays saved and the error reaches the caller.
    """

    def __init__(self, calendar: HolidayCalendar, coordinator: RescheduleCoordinator):
        self._calendar = calendar
        self._coordinator = coordinator

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to manage holidays")

    def add_holiday(
        self,
        *,
        current_role: Role,
        actor: str,
        name: str,
        start_date: date,
        end_date: date,
        color_hex: Optional[str] = None,
    ) -> Tuple[Holiday, RescheduleReport]:
        self._require_admin(current_role)

        saved = self._calendar.add(
            Holiday(
                holiday_id=None,
                name=name,
                start_date=start_date,
                end_date=end_date,
                color_hex=color_hex or DEFAULT_HOLIDAY_COLOR,
            ),
            actor=require_non_empty(actor, "Actor"),
        )
        report = self._coordinator.reschedule_after(saved.start_date, saved.end_date)
        return saved, report

    def update_holiday(
        self,
        *,
        current_role: Role,
        actor: str,
        holiday_id: int,
        name: str,
        start_date: date,
        end_date: date,
        color_hex: Optional[str] = None,
    ) -> Tuple[Holiday, RescheduleReport]:
        self._require_admin(current_role)

        previous = self._calendar.get(int(holiday_id))
        if previous is None:
            raise ValidationError("Holiday does not exist")

        saved = self._calendar.update(
            Holiday(
                holiday_id=previous.holiday_id,
                name=name,
                start_date=start_date,
                end_date=end_date,
                color_hex=color_hex or previous.color_hex,
            ),
            actor=require_non_empty(actor, "Actor"),
        )
        if saved is None:
            raise ValidationError("Updating holiday failed")

        # Both the freed and the newly blocked dates can move sessions.
        report = self._coordinator.reschedule_after(
            min(previous.start_date, saved.start_date),
            max(previous.end_date, saved.end_date),
        )
        return saved, report

    def delete_holiday(self, *, current_role: Role, actor: str, holiday_id: int) -> RescheduleReport:
        self._require_admin(current_role)

        holiday = self._calendar.get(int(holiday_id))
        if holiday is None:
            raise ValidationError("Holiday does not exist")

        if not self._calendar.remove(int(holiday_id), actor=require_non_empty(actor, "Actor")):
            raise ValidationError("Deleting holiday failed")

        return self._coordinator.reschedule_after(holiday.start_date, holiday.end_date)

    def list_holidays(self, *, year: Optional[int] = None) -> List[Holiday]:
        if year is None:
            return self._calendar.list_all()
        return self._calendar.list_by_year(int(year))

    def recent_history(self, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[HolidayHistory]:
        return self._calendar.recent_history(limit)
