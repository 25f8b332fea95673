from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from src.class_journal.class_journal.attendance.model import AttendanceMark
from src.class_journal.class_journal.attendance.service import AttendanceService
from src.class_journal.class_journal.students.model import Student


@dataclass
class InMemoryStudents:
    students_by_id: dict[int, Student]

    async def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.students_by_id.get(student_id)


class InMemoryAttendance:
    def __init__(self):
        self._by_key: dict[tuple[int, str, Optional[int]], AttendanceMark] = {}
        self.inserts = 0
        self.updates = 0

    async def list_all(self):
        return list(self._by_key.values())

    async def find(self, *, student_id: int, date: str, hour: Optional[int]) -> Optional[AttendanceMark]:
        return self._by_key.get((student_id, date, hour))

    async def update_status(self, *, student_id: int, date: str, hour: Optional[int], status: str) -> bool:
        self.updates += 1
        self._by_key[(student_id, date, hour)] = AttendanceMark(student_id, date, status, hour)
        return True

    async def insert(self, *, student_id: int, date: str, hour: Optional[int], status: str) -> int:
        self.inserts += 1
        self._by_key[(student_id, date, hour)] = AttendanceMark(student_id, date, status, hour)
        return len(self._by_key)


@dataclass
class ListPublisher:
    sent: list = field(default_factory=list)

    def publish(self, event, payload=None, *, exclude=None):
        self.sent.append((event, payload))


def _service():
    students = InMemoryStudents({1: Student(student_id=1, name="Anna", group="G", course=1)})
    attendance = InMemoryAttendance()
    publisher = ListPublisher()
    return AttendanceService(attendance, students, publisher), attendance, publisher


def test_second_write_for_same_key_updates_instead_of_inserting():
    svc, attendance, publisher = _service()

    asyncio.run(svc.record_attendance(1, "2024-01-01", "present", hour=1))
    asyncio.run(svc.record_attendance(1, "2024-01-01", "late", hour=1))

    assert (attendance.inserts, attendance.updates) == (1, 1)
    assert [event for event, _ in publisher.sent] == ["attendance_updated", "attendance_updated"]
    assert publisher.sent[-1][1]["status"] == "late"


def test_whole_day_lookup_does_not_match_hourly_mark():
    svc, attendance, _ = _service()

    asyncio.run(svc.record_attendance(1, "2024-01-01", "absent", hour=3))
    asyncio.run(svc.record_attendance(1, "2024-01-01", "present"))

    assert attendance.inserts == 2
    overview = asyncio.run(svc.get_all_attendance())
    assert overview == {
        "daily": {"2024-01-01": {1: "present"}},
        "hourly": {"2024-01-01": {1: {3: "absent"}}},
    }
