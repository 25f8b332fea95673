from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..common.validators import is_missing, require_fields, require_int, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..realtime.hub import ATTENDANCE_UPDATED, Publisher
from ..students.repository import StudentRepository
from .model import AttendanceMark, AttendanceOverview
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def build_overview(marks: Iterable[AttendanceMark]) -> AttendanceOverview:
    """Split marks into ``daily[date][student]`` and ``hourly[date][student][hour]``.

    A mark lands in exactly one of the two views, depending on its hour.
    """

    daily: dict = {}
    hourly: dict = {}
    for mark in marks:
        if mark.is_whole_day:
            daily.setdefault(mark.date, {})[mark.student_id] = mark.status
        else:
            hourly.setdefault(mark.date, {}).setdefault(mark.student_id, {})[mark.hour] = mark.status
    return AttendanceOverview(daily=daily, hourly=hourly)


def _normalize_hour(hour: Any) -> Optional[int]:
    if is_missing(hour):
        return None
    hour = require_int(hour, "hour")
    if hour < 0:
        raise ValidationError("hour must be zero or positive")
    return hour


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        publisher: Publisher,
    ):
        self._attendance = attendance
        self._students = students
        self._publisher = publisher

    async def get_all_attendance(self) -> dict:
        marks = await self._attendance.list_all()
        return build_overview(marks).to_dict()

    async def record_attendance(self, student_id: Any, date: Any, status: Any, hour: Any = None) -> dict:
        """Upsert the mark for (student, date, hour) and announce it.

        Concurrent first writes to the same key can both miss the lookup; the
        store's unique index then fails the later insert with ``StoreError``.
        """

        require_fields({"studentId": student_id, "date": date, "status": status}, "studentId", "date", "status")
        student_id = require_int(student_id, "studentId")
        date = require_non_empty(date, "date")
        status = require_non_empty(status, "status")
        hour = _normalize_hour(hour)

        logger.info("Saving attendance: student=%s date=%s status=%s hour=%s", student_id, date, status, hour)

        if not await self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        existing = await self._attendance.find(student_id=student_id, date=date, hour=hour)
        if existing:
            await self._attendance.update_status(student_id=student_id, date=date, hour=hour, status=status)
        else:
            await self._attendance.insert(student_id=student_id, date=date, hour=hour, status=status)

        data = {"studentId": student_id, "date": date, "status": status, "hour": hour}
        self._publisher.publish(ATTENDANCE_UPDATED, data)
        return {"success": True, **data}
