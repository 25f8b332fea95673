from __future__ import annotations

from typing import Optional, Sequence

from ..database.sqlite_base import RecordStore
from .model import Student
from .repository import StudentRepository


def _to_student(row: dict) -> Student:
    return Student(
        student_id=int(row["id"]),
        name=row["name"],
        group=row["group_name"],
        course=row["course"],
        created_at=row.get("created_at"),
    )


class SQLiteStudentRepository(StudentRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    async def list_by_name(self) -> Sequence[Student]:
        rows = await self._store.query_many(
            "SELECT id, name, group_name, course, created_at FROM students ORDER BY name ASC"
        )
        return [_to_student(r) for r in rows]

    async def get_by_id(self, student_id: int) -> Optional[Student]:
        row = await self._store.query_one(
            "SELECT id, name, group_name, course, created_at FROM students WHERE id = ?",
            (student_id,),
        )
        if not row:
            return None
        return _to_student(row)

    async def create(self, *, name: str, group: str, course: int) -> int:
        result = await self._store.execute(
            "INSERT INTO students (name, group_name, course) VALUES (?, ?, ?)",
            (name, group, course),
        )
        return int(result.lastrowid)

    async def delete_with_attendance(self, student_id: int) -> bool:
        # Marks go first and in the same transaction; the FK cascade is not relied upon.
        _, removed = await self._store.execute_all(
            [
                ("DELETE FROM attendance WHERE student_id = ?", (student_id,)),
                ("DELETE FROM students WHERE id = ?", (student_id,)),
            ]
        )
        return removed.rowcount > 0
