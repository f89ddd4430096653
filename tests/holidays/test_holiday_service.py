from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from src.tutoring_center.tutoring_center.core.enums import Role
from src.tutoring_center.tutoring_center.core.exceptions import AuthorizationError, RescheduleError, ValidationError
from src.tutoring_center.tutoring_center.holidays.calendar import HolidayCalendar
from src.tutoring_center.tutoring_center.holidays.model import Holiday, HolidayHistory
from src.tutoring_center.tutoring_center.holidays.service import HolidayService
from src.tutoring_center.tutoring_center.scheduling.model import RescheduleReport


class FakeHolidaysRepo:
    def __init__(self):
        self._items: dict[int, Holiday] = {}
        self._next_id = 1

    def get_by_id(self, holiday_id):
        return self._items.get(int(holiday_id))

    def exists_on(self, day):
        return any(h.covers(day) for h in self._items.values())

    def find_covering(self, day):
        return next((h for h in self._items.values() if h.covers(day)), None)

    def list_all(self):
        return sorted(self._items.values(), key=lambda h: h.start_date)

    def find_by_year(self, year):
        return [h for h in self.list_all() if h.overlaps_year(year)]

    def find_expired_before(self, day):
        return []

    def delete_expired_before(self, day):
        return 0

    def create(self, holiday):
        saved = replace(holiday, holiday_id=self._next_id)
        self._items[saved.holiday_id] = saved
        self._next_id += 1
        return saved

    def update(self, holiday):
        if holiday.holiday_id not in self._items:
            return False
        self._items[holiday.holiday_id] = holiday
        return True

    def delete(self, holiday_id):
        return self._items.pop(int(holiday_id), None) is not None


class FakeHistoryRepo:
    def __init__(self):
        self.entries: list[HolidayHistory] = []

    def append(self, actor, action, timestamp):
        self.entries.append(HolidayHistory(len(self.entries) + 1, actor, action, timestamp))
        return len(self.entries)

    def list_recent(self, limit):
        return list(reversed(self.entries))[:limit]


class FakeCoordinator:
    def __init__(self, fail=False):
        self.ranges: list[tuple[date, date]] = []
        self.fail = fail

    def reschedule_after(self, range_start, range_end):
        self.ranges.append((range_start, range_end))
        if self.fail:
            raise RescheduleError("No sessions could be generated for course X", course_id="X")
        return RescheduleReport(range_start=range_start, range_end=range_end)


def build_service(coordinator=None):
    holidays = FakeHolidaysRepo()
    history = FakeHistoryRepo()
    calendar = HolidayCalendar(holidays, history, clock=lambda: datetime(2026, 1, 5, 9, 0, 0))
    coordinator = coordinator or FakeCoordinator()
    return HolidayService(calendar, coordinator), holidays, history, coordinator


def test_non_admin_cannot_manage_holidays():
    svc, holidays, _, coordinator = build_service()

    with pytest.raises(AuthorizationError):
        svc.add_holiday(
            current_role=Role.TEACHER,
            actor="teacher1",
            name="Tet",
            start_date=date(2026, 2, 16),
            end_date=date(2026, 2, 20),
        )
    with pytest.raises(AuthorizationError):
        svc.delete_holiday(current_role=Role.STAFF, actor="staff1", holiday_id=1)

    assert holidays.list_all() == []
    assert coordinator.ranges == []


def test_add_holiday_reschedules_its_range():
    svc, _, history, coordinator = build_service()

    holiday, report = svc.add_holiday(
        current_role=Role.ADMIN,
        actor="admin",
        name="Tet",
        start_date=date(2026, 2, 16),
        end_date=date(2026, 2, 20),
        color_hex="#00ff00",
    )

    assert holiday.holiday_id == 1
    assert holiday.color_hex == "#00FF00"
    assert coordinator.ranges == [(date(2026, 2, 16), date(2026, 2, 20))]
    assert report.ok
    assert history.entries[0].actor == "admin"


def test_invalid_holiday_is_not_saved_or_rescheduled():
    svc, holidays, _, coordinator = build_service()

    with pytest.raises(ValidationError):
        svc.add_holiday(
            current_role=Role.ADMIN,
            actor="admin",
            name="Tet",
            start_date=date(2026, 2, 20),
            end_date=date(2026, 2, 16),
        )

    assert holidays.list_all() == []
    assert coordinator.ranges == []


def test_update_reschedules_union_of_old_and_new_ranges():
    svc, _, _, coordinator = build_service()
    holiday, _ = svc.add_holiday(
        current_role=Role.ADMIN, actor="admin", name="Retreat", start_date=date(2026, 3, 2), end_date=date(2026, 3, 3)
    )

    updated, _ = svc.update_holiday(
        current_role=Role.ADMIN,
        actor="admin",
        holiday_id=holiday.holiday_id,
        name="Retreat",
        start_date=date(2026, 3, 9),
        end_date=date(2026, 3, 10),
    )

    assert updated.start_date == date(2026, 3, 9)
    assert updated.color_hex == holiday.color_hex
    assert coordinator.ranges[-1] == (date(2026, 3, 2), date(2026, 3, 10))


def test_delete_holiday_reschedules_freed_range():
    svc, holidays, history, coordinator = build_service()
    holiday, _ = svc.add_holiday(
        current_role=Role.ADMIN, actor="admin", name="Tet", start_date=date(2026, 2, 16), end_date=date(2026, 2, 20)
    )

    svc.delete_holiday(current_role=Role.ADMIN, actor="admin", holiday_id=holiday.holiday_id)

    assert holidays.list_all() == []
    assert coordinator.ranges[-1] == (date(2026, 2, 16), date(2026, 2, 20))
    assert history.entries[-1].action == "Deleted holiday: Tet (ID: 1)"


def test_delete_missing_holiday_raises_validation_error():
    svc, _, _, coordinator = build_service()

    with pytest.raises(ValidationError):
        svc.delete_holiday(current_role=Role.ADMIN, actor="admin", holiday_id=99)
    assert coordinator.ranges == []


def test_reschedule_failure_propagates_but_holiday_stays_saved():
    svc, holidays, _, _ = build_service(FakeCoordinator(fail=True))

    with pytest.raises(RescheduleError):
        svc.add_holiday(
            current_role=Role.ADMIN,
            actor="admin",
            name="Tet",
            start_date=date(2026, 2, 16),
            end_date=date(2026, 2, 20),
        )

    assert [h.name for h in holidays.list_all()] == ["Tet"]


def test_list_holidays_by_year_and_history():
    svc, _, _, _ = build_service()
    svc.add_holiday(
        current_role=Role.ADMIN, actor="admin", name="Tet", start_date=date(2026, 2, 16), end_date=date(2026, 2, 20)
    )
    svc.add_holiday(
        current_role=Role.ADMIN, actor="admin", name="New Year", start_date=date(2026, 12, 31), end_date=date(2027, 1, 1)
    )

    assert [h.name for h in svc.list_holidays()] == ["Tet", "New Year"]
    assert [h.name for h in svc.list_holidays(year=2027)] == ["New Year"]
    assert [e.action.split(":")[0] for e in svc.recent_history(limit=5)] == ["Created holiday", "Created holiday"]


class ChangedRowsHolidaysRepo(FakeHolidaysRepo):
    def update(self, holiday):
        if self._items.get(holiday.holiday_id) == holiday:
            return False
        return super().update(holiday)


def test_resaving_unchanged_holiday_still_reschedules():
    holidays = ChangedRowsHolidaysRepo()
    calendar = HolidayCalendar(holidays, FakeHistoryRepo(), clock=lambda: datetime(2026, 1, 5, 9, 0, 0))
    coordinator = FakeCoordinator()
    svc = HolidayService(calendar, coordinator)
    holiday, _ = svc.add_holiday(
        current_role=Role.ADMIN, actor="admin", name="Tet", start_date=date(2026, 2, 16), end_date=date(2026, 2, 20)
    )

    saved, report = svc.update_holiday(
        current_role=Role.ADMIN,
        actor="admin",
        holiday_id=holiday.holiday_id,
        name="Tet",
        start_date=date(2026, 2, 16),
        end_date=date(2026, 2, 20),
    )

    assert saved == holiday
    assert report.ok
    assert coordinator.ranges[-1] == (date(2026, 2, 16), date(2026, 2, 20))
