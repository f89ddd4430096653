from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for admin-only actions."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STAFF = "staff"


class RescheduleGranularity(str, Enum):
    """How a holiday cascade is split into units of work.

    BATCH: every affected course commits or rolls back together.
    PER_COURSE: each course commits on its own; failures are reported.
    """

    BATCH = "batch"
    PER_COURSE = "per_course"
