from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional, Tuple


@dataclass(frozen=True)
class Course:
    course_id: str
    course_name: str
    start_date: Optional[date]
    start_time: Optional[time]
    end_time: Optional[time]
    days_of_week: Tuple[str, ...] = field(default_factory=tuple)
    total_sessions: int = 0
    end_date: Optional[date] = None
    room_id: Optional[str] = None
    teacher_id: Optional[str] = None
    subject: Optional[str] = None
