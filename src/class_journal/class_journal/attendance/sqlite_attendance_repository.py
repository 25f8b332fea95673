from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import WHOLE_DAY_HOUR
from ..database.sqlite_base import RecordStore
from .model import AttendanceMark
from .repository import AttendanceRepository


def _stored_hour(hour: Optional[int]) -> int:
    return WHOLE_DAY_HOUR if hour is None else int(hour)


def _to_mark(row: dict) -> AttendanceMark:
    hour = row["hour"]
    return AttendanceMark(
        mark_id=row.get("id"),
        student_id=int(row["student_id"]),
        date=row["date"],
        status=row["status"],
        hour=None if hour is None or hour == WHOLE_DAY_HOUR else int(hour),
        created_at=row.get("created_at"),
    )


class SQLiteAttendanceRepository(AttendanceRepository):
    """Attendance marks stored with the whole-day sentinel in ``hour``.

    The sentinel is confined to this class; callers only ever see None.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    async def list_all(self) -> Sequence[AttendanceMark]:
        rows = await self._store.query_many(
            """
            SELECT id, student_id, date, status, hour, created_at
            FROM attendance
            ORDER BY date DESC, student_id, hour
            """
        )
        return [_to_mark(r) for r in rows]

    async def find(self, *, student_id: int, date: str, hour: Optional[int]) -> Optional[AttendanceMark]:
        row = await self._store.query_one(
            """
            SELECT id, student_id, date, status, hour, created_at
            FROM attendance
            WHERE student_id = ? AND date = ? AND hour = ?
            """,
            (student_id, date, _stored_hour(hour)),
        )
        if not row:
            return None
        return _to_mark(row)

    async def update_status(self, *, student_id: int, date: str, hour: Optional[int], status: str) -> bool:
        result = await self._store.execute(
            "UPDATE attendance SET status = ? WHERE student_id = ? AND date = ? AND hour = ?",
            (status, student_id, date, _stored_hour(hour)),
        )
        return result.rowcount > 0

    async def insert(self, *, student_id: int, date: str, hour: Optional[int], status: str) -> int:
        result = await self._store.execute(
            "INSERT INTO attendance (student_id, date, hour, status) VALUES (?, ?, ?, ?)",
            (student_id, date, _stored_hour(hour), status),
        )
        return int(result.lastrowid)
