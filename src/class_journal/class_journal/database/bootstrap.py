from __future__ import annotations

import logging
import sqlite3
from typing import Callable, Sequence

from ..core.constants import WHOLE_DAY_HOUR
from .connection import DatabaseConnection
from .sqlite_base import db_cursor

logger = logging.getLogger(__name__)

Migration = Callable[[sqlite3.Cursor], None]


def _create_base_tables(cur: sqlite3.Cursor) -> None:
    # Historical shape, kept so databases written by the old server and fresh
    # ones converge through the same step 2.
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS entries (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            date TEXT,
            note TEXT,
            updatedAt TEXT
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS students (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            group_name TEXT NOT NULL,
            course INTEGER NOT NULL,
            created_at TEXT DEFAULT CURRENT_TIMESTAMP
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS attendance (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            student_id INTEGER NOT NULL,
            date TEXT NOT NULL,
            status TEXT NOT NULL,
            created_at TEXT DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(student_id, date),
            FOREIGN KEY(student_id) REFERENCES students(id) ON DELETE CASCADE
        )
        """
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_attendance_date ON attendance(date)")


def column_names(cur: sqlite3.Cursor, table: str) -> list[str]:
    cur.execute(f"PRAGMA table_info({table})")
    return [row[1] for row in cur.fetchall()]


def _introduce_hour(cur: sqlite3.Cursor) -> None:
    """Rebuild attendance keyed on (student_id, date, hour).

    The inline UNIQUE(student_id, date) cannot be dropped in SQLite, so the
    table is copied. A nullable hour column left by the old server is folded
    onto the whole-day sentinel.
    """

    columns = column_names(cur, "attendance")
    if "hour" in columns:
        cur.execute("SELECT COUNT(*) FROM attendance WHERE hour IS NULL")
        has_nulls = cur.fetchone()[0] > 0
        cur.execute("PRAGMA index_list(attendance)")
        has_new_key = any(row[1] == "uq_attendance_student_date_hour" for row in cur.fetchall())
        if has_new_key and not has_nulls:
            return
        hour_expr = f"COALESCE(hour, {WHOLE_DAY_HOUR})"
    else:
        logger.info("Adding hour column to attendance table...")
        hour_expr = str(WHOLE_DAY_HOUR)

    cur.execute("DROP INDEX IF EXISTS idx_attendance_student_date")
    cur.execute("DROP INDEX IF EXISTS idx_attendance_student_date_hour")
    cur.execute(
        f"""
        CREATE TABLE attendance_new (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            student_id INTEGER NOT NULL,
            date TEXT NOT NULL,
            hour INTEGER NOT NULL DEFAULT {WHOLE_DAY_HOUR},
            status TEXT NOT NULL,
            created_at TEXT DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(student_id) REFERENCES students(id) ON DELETE CASCADE
        )
        """
    )
    cur.execute(
        f"""
        INSERT INTO attendance_new (id, student_id, date, hour, status, created_at)
        SELECT id, student_id, date, {hour_expr}, status, created_at
        FROM attendance
        """
    )
    cur.execute("DROP TABLE attendance")
    cur.execute("ALTER TABLE attendance_new RENAME TO attendance")
    cur.execute(
        "CREATE UNIQUE INDEX uq_attendance_student_date_hour ON attendance(student_id, date, hour)"
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_attendance_date ON attendance(date)")
    logger.info("Hour column added successfully")


MIGRATIONS: Sequence[Migration] = (
    _create_base_tables,
    _introduce_hour,
)


def schema_version(conn_factory: DatabaseConnection) -> int:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("PRAGMA user_version")
        return int(cur.fetchone()[0])


def apply_migrations(conn_factory: DatabaseConnection, migrations: Sequence[Migration] = MIGRATIONS) -> int:
    """Bring the schema to the latest version; returns that version.

    Each step runs in its own transaction together with the user_version bump,
    so an interrupted startup resumes from the last completed step.
    """

    current = schema_version(conn_factory)
    for version, migrate in enumerate(migrations, start=1):
        if version <= current:
            continue
        logger.info("Applying schema migration %d (%s)", version, migrate.__name__.lstrip("_"))
        conn = conn_factory.connect()
        # Python's sqlite3 only opens implicit transactions for DML; DDL needs
        # an explicit BEGIN to roll back as a unit.
        conn.isolation_level = None
        try:
            cur = conn.cursor()
            cur.execute("PRAGMA foreign_keys = OFF")
            cur.execute("BEGIN")
            try:
                migrate(cur)
                cur.execute(f"PRAGMA user_version = {version}")
                cur.execute("COMMIT")
            except Exception:
                cur.execute("ROLLBACK")
                raise
        finally:
            conn.close()
        current = version
    return current


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name")
        return [row[0] for row in cur.fetchall()]
