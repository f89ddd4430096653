from __future__ import annotations

from typing import Callable, Protocol

from ..courses.repository import CourseStore
from ..sessions.repository import SessionStore


class ScheduleUnitOfWork(Protocol):
    """Session and course stores bound to one transaction.

    Leaving the `with` block normally commits; leaving it with an exception
    rolls back every write made through `sessions` and `courses`.
    """

    sessions: SessionStore
    courses: CourseStore

    def __enter__(self) -> "ScheduleUnitOfWork":
        raise NotImplementedError

    def __exit__(self, exc_type, exc, tb) -> bool:
        raise NotImplementedError


UnitOfWorkFactory = Callable[[], ScheduleUnitOfWork]
