"""Example: using the service layer directly (no Flask).

Controllers are thin; business rules live in the services, which can be
driven from any asyncio code.
"""

import asyncio
import importlib

from config import get_settings_module

from src.class_journal.class_journal.container import build_container
from src.class_journal.class_journal.database.bootstrap import apply_migrations


async def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    apply_migrations(container.conn)

    container.hub.subscribe("console", lambda event, payload: print("event:", event, payload))

    student = await container.student_service.create_student("Demo Student", "CS-101", 1)
    await container.attendance_service.record_attendance(student["id"], "2024-01-01", "present")
    await container.attendance_service.record_attendance(student["id"], "2024-01-01", "absent", hour=2)
    print(await container.attendance_service.get_all_attendance())


if __name__ == "__main__":
    asyncio.run(main())
