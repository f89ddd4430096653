from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Classroom:
    room_id: str
    room_name: str
