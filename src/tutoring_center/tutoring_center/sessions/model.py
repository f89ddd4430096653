from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def session_id_for(course_id: str, session_date: date, session_number: int) -> str:
    """Stable id of the n-th session of a course on a given date.

    Regenerating an unchanged schedule yields the same ids.
    """
    return f"SESS_{_NON_ALNUM.sub('', course_id)}_{session_date.strftime('%Y%m%d')}_{session_number:03d}"


@dataclass(frozen=True)
class ClassSession:
    session_id: str
    course_id: str
    course_name: str
    session_date: date
    start_time: datetime
    end_time: datetime
    session_number: int
    room_name: str
    teacher_name: str
    note: Optional[str] = None
