from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student in a cohort.

    Note: plain data object, no DB access here.
    """

    student_id: int
    name: str
    group: str
    course: int
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "group": self.group,
            "course": self.course,
            "created_at": self.created_at,
        }
