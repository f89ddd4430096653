from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.tutoring_center.tutoring_center.common.logging_setup import configure_logging
from src.tutoring_center.tutoring_center.container import build_container
from src.tutoring_center.tutoring_center.database.bootstrap import apply_seed_sql

DEMO_COURSE_IDS = ("ENG-101",)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    # Seeded courses have no sessions yet.
    container = build_container(db_config=db_config)
    for course_id in DEMO_COURSE_IDS:
        outcome = container.reschedule_coordinator.schedule_course(course_id)
        print(f"{course_id}: {outcome.generated_sessions}/{outcome.target_sessions} sessions, ends {outcome.new_end_date}")

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
