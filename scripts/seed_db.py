from __future__ import annotations

import asyncio
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_journal.class_journal.container import build_container
from src.class_journal.class_journal.database.bootstrap import apply_migrations

DEMO_STUDENTS = [
    {"name": "Anna Ivanova", "group": "CS-101", "course": 1},
    {"name": "Boris Petrov", "group": "CS-101", "course": 1},
    {"name": "Daria Smirnova", "group": "CS-201", "course": 2},
    {"name": "Egor Kuznetsov", "group": "CS-201", "course": 2},
]


async def seed() -> dict:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))
    apply_migrations(container.conn)
    return await container.student_service.batch_create_students(DEMO_STUDENTS)


def main() -> None:
    summary = asyncio.run(seed())
    print(f"OK: Seeded students (added={summary['added']}, errors={summary['errors']})")


if __name__ == "__main__":
    main()
