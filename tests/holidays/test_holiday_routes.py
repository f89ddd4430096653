from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from flask import Flask

from src.tutoring_center.tutoring_center.core.enums import Role
from src.tutoring_center.tutoring_center.core.exceptions import ValidationError
from src.tutoring_center.tutoring_center.holidays.controller import register
from src.tutoring_center.tutoring_center.holidays.model import Holiday, HolidayHistory
from src.tutoring_center.tutoring_center.scheduling.model import CourseOutcome, RescheduleReport


class FakeHolidayService:
    def __init__(self):
        self.calls = []

    def list_holidays(self, *, year=None):
        self.calls.append(("list", year))
        return [Holiday(1, "Tet", date(2026, 2, 16), date(2026, 2, 20))]

    def add_holiday(self, *, current_role, actor, name, start_date, end_date, color_hex=None):
        self.calls.append(("add", current_role, actor, name, start_date, end_date, color_hex))
        if start_date > end_date:
            raise ValidationError("Holiday: start date is after end date")
        holiday = Holiday(7, name, start_date, end_date)
        outcome = CourseOutcome("ENG-101", 24, 20, 24, date(2026, 4, 1), date(2026, 6, 1))
        return holiday, RescheduleReport(start_date, end_date, outcomes=(outcome,))

    def delete_holiday(self, *, current_role, actor, holiday_id):
        raise ValidationError("Holiday does not exist")

    def recent_history(self, *, limit=30):
        self.calls.append(("history", limit))
        return [HolidayHistory(1, "admin", "Created holiday: Tet", datetime(2026, 1, 5, 9, 0, 0))]


@pytest.fixture
def service():
    return FakeHolidayService()


@pytest.fixture
def client(service):
    app = Flask(__name__)
    app.secret_key = "test"
    register(app, SimpleNamespace(holiday_service=service))
    return app.test_client()


def login(client, role: Role):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
        sess["username"] = "admin"
        sess["role"] = role.value


def test_login_is_required(client):
    assert client.get("/admin/holidays").status_code == 401


def test_non_admin_is_forbidden(client):
    login(client, Role.TEACHER)

    assert client.get("/admin/holidays").status_code == 403


def test_list_holidays_filters_by_year(client, service):
    login(client, Role.ADMIN)

    resp = client.get("/admin/holidays?year=2026")

    assert resp.status_code == 200
    assert resp.get_json()["holidays"][0] == {
        "id": 1,
        "name": "Tet",
        "start_date": "2026-02-16",
        "end_date": "2026-02-20",
        "color": "#FF6B6B",
    }
    assert service.calls == [("list", 2026)]


def test_create_holiday_returns_reschedule_summary(client, service):
    login(client, Role.ADMIN)

    resp = client.post("/admin/holidays", json={"name": "Tet", "start_date": "2026-02-16", "end_date": "2026-02-20"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["holiday"]["id"] == 7
    assert body["reschedule"]["courses"] == ["ENG-101"]
    assert body["reschedule"]["shortfalls"] == [{"course_id": "ENG-101", "generated": 20, "target": 24}]
    assert service.calls[0][1:3] == (Role.ADMIN, "admin")


def test_create_holiday_with_bad_date_is_rejected(client):
    login(client, Role.ADMIN)

    resp = client.post("/admin/holidays", data={"name": "Tet", "start_date": "16/02/2026", "end_date": "2026-02-20"})

    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_delete_unknown_holiday_is_bad_request(client):
    login(client, Role.ADMIN)

    assert client.post("/admin/holidays/99/delete").status_code == 400


def test_history_uses_limit(client, service):
    login(client, Role.ADMIN)

    resp = client.get("/admin/holidays/history?limit=5")

    assert resp.get_json()["history"][0]["timestamp"] == "2026-01-05 09:00:00"
    assert service.calls == [("history", 5)]
