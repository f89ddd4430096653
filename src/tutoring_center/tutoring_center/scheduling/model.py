from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class CourseOutcome:
    course_id: str
    target_sessions: int
    generated_sessions: int
    deleted_sessions: int
    old_end_date: Optional[date]
    new_end_date: Optional[date]

    @property
    def end_date_changed(self) -> bool:
        return self.old_end_date != self.new_end_date

    @property
    def is_shortfall(self) -> bool:
        return self.generated_sessions < self.target_sessions


@dataclass(frozen=True)
class RescheduleReport:
    range_start: date
    range_end: date
    outcomes: Tuple[CourseOutcome, ...] = ()
    failed: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def course_ids(self) -> List[str]:
        return [o.course_id for o in self.outcomes]

    @property
    def shortfalls(self) -> List[CourseOutcome]:
        return [o for o in self.outcomes if o.is_shortfall]
