from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttendanceMark:
    """Domain entity: one student's status on a date.

    ``hour`` is None for a whole-day mark.
    """

    student_id: int
    date: str
    status: str
    hour: Optional[int] = None
    mark_id: Optional[int] = None
    created_at: Optional[str] = None

    @property
    def is_whole_day(self) -> bool:
        return self.hour is None


@dataclass(frozen=True)
class AttendanceOverview:
    """Read-model for dashboards: daily and hourly views of every mark."""

    daily: dict
    hourly: dict

    def to_dict(self) -> dict:
        return {"daily": self.daily, "hourly": self.hourly}
