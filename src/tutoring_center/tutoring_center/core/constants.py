"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SYSTEM_ACTOR = "SYSTEM"
UNRESOLVED_NAME = "N/A"

DEFAULT_HOLIDAY_COLOR = "#FF6B6B"
DEFAULT_HOLIDAY_CACHE_TTL_MINUTES = 30
DEFAULT_SCHEDULE_HORIZON_YEARS = 3
DEFAULT_HISTORY_LIMIT = 30
