from __future__ import annotations

from typing import Optional, Protocol

from .model import Classroom


class RoomLookup(Protocol):
    def get_by_id(self, room_id: str) -> Optional[Classroom]:
        raise NotImplementedError
