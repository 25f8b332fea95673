from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceMark


class AttendanceRepository(Protocol):
    async def list_all(self) -> Sequence[AttendanceMark]:
        """Every mark, ordered by date desc, then student, then hour."""

        raise NotImplementedError

    async def find(self, *, student_id: int, date: str, hour: Optional[int]) -> Optional[AttendanceMark]:
        """Look up by natural key; hour=None matches whole-day marks only."""

        raise NotImplementedError

    async def update_status(self, *, student_id: int, date: str, hour: Optional[int], status: str) -> bool:
        raise NotImplementedError

    async def insert(self, *, student_id: int, date: str, hour: Optional[int], status: str) -> int:
        raise NotImplementedError
