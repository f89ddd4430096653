"""Example: drive the scheduling services directly, without Flask.

Adds a one-day holiday, prints how the affected courses moved, then removes it.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.tutoring_center.tutoring_center.common.logging_setup import configure_logging
from src.tutoring_center.tutoring_center.container import build_container
from src.tutoring_center.tutoring_center.core.enums import Role


def main():
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=settings.DB_CONFIG)
    service = container.holiday_service

    holiday, report = service.add_holiday(
        current_role=Role.ADMIN,
        actor="example",
        name="Staff training day",
        start_date=date.today(),
        end_date=date.today(),
    )
    for outcome in report.outcomes:
        print(outcome.course_id, outcome.old_end_date, "->", outcome.new_end_date)

    service.delete_holiday(current_role=Role.ADMIN, actor="example", holiday_id=holiday.holiday_id)


if __name__ == "__main__":
    main()
