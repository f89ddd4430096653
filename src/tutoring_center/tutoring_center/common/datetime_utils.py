from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

# Python weekday() numbering: Monday == 0 .. Sunday == 6.
WEEKDAY_TOKENS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")
WEEKDAY_NAMES = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def add_years(value: date, years: int) -> date:
    """Shift a date by whole years, clamping Feb 29 to Feb 28."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def parse_weekday(token: Optional[str]) -> Optional[int]:
    """Map a day name ("Mon", "tue", "Wednesday") to date.weekday().

    Accepts the three-letter token or the full English name, case-insensitive.
    Returns None for anything else ("Monkey", "Sunrise").
    """
    if token is None:
        return None
    key = token.strip().upper()
    if key in WEEKDAY_TOKENS:
        return WEEKDAY_TOKENS.index(key)
    if key in WEEKDAY_NAMES:
        return WEEKDAY_NAMES.index(key)
    logger.warning("Invalid weekday token: %r", token)
    return None


def weekday_token(weekday: int) -> str:
    """Inverse of parse_weekday: 0 -> "Mon"."""
    return WEEKDAY_TOKENS[weekday].title()
