import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tutoring_center"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo rooms/teachers/courses on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

HOLIDAY_CACHE_TTL_MINUTES = int(os.getenv("HOLIDAY_CACHE_TTL_MINUTES", "30"))
SCHEDULE_HORIZON_YEARS = int(os.getenv("SCHEDULE_HORIZON_YEARS", "3"))
# "batch": one unit of work for the whole holiday cascade; "per_course": one per course
RESCHEDULE_GRANULARITY = os.getenv("RESCHEDULE_GRANULARITY", "batch")
