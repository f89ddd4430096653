from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    teacher_id: str
    full_name: str
