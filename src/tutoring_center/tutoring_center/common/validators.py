from __future__ import annotations

import re
from datetime import date

from ..core.exceptions import ValidationError

_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date_range(start: date, end: date, *, field_name: str = "date range") -> None:
    if start is None or end is None:
        raise ValidationError(f"{field_name} needs both a start and an end date")
    if start > end:
        raise ValidationError(f"{field_name}: start date {start} is after end date {end}")


def require_color_hex(value: str, field_name: str = "color") -> str:
    value = (value or "").strip()
    if not _COLOR_RE.match(value):
        raise ValidationError(f"{field_name} must look like #RRGGBB")
    return value.upper()
