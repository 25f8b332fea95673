from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for students.

    Note (DIP): the service depends on this interface, not on a concrete DB.
    """

    async def list_by_name(self) -> Sequence[Student]:
        raise NotImplementedError

    async def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    async def create(self, *, name: str, group: str, course: int) -> int:
        raise NotImplementedError

    async def delete_with_attendance(self, student_id: int) -> bool:
        """Remove the student's attendance marks, then the student."""

        raise NotImplementedError
