from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .core.constants import DEFAULT_CONNECT_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .database.sqlite_base import RecordStore
from .entries.service import EntryService
from .entries.sqlite_entry_repository import SQLiteEntryRepository
from .realtime.hub import EventHub
from .students.service import StudentService
from .students.sqlite_student_repository import SQLiteStudentRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    store: RecordStore
    hub: EventHub

    students_repo: SQLiteStudentRepository
    attendance_repo: SQLiteAttendanceRepository
    entries_repo: SQLiteEntryRepository

    student_service: StudentService
    attendance_service: AttendanceService
    entry_service: EntryService


def build_container(*, db_config: dict, hub: Optional[EventHub] = None) -> Container:
    config = DBConfig(
        path=str(db_config["path"]),
        timeout=float(db_config.get("timeout", DEFAULT_CONNECT_TIMEOUT)),
    )
    conn = DatabaseConnection(config)
    store = RecordStore(conn)
    hub = hub or EventHub()

    students_repo = SQLiteStudentRepository(store)
    attendance_repo = SQLiteAttendanceRepository(store)
    entries_repo = SQLiteEntryRepository(store)

    student_service = StudentService(students_repo, hub)
    attendance_service = AttendanceService(attendance_repo, students_repo, hub)
    entry_service = EntryService(entries_repo, hub)

    return Container(
        conn=conn,
        store=store,
        hub=hub,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        entries_repo=entries_repo,
        student_service=student_service,
        attendance_service=attendance_service,
        entry_service=entry_service,
    )
