from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_journal.class_journal.database.bootstrap import apply_migrations, list_tables
from src.class_journal.class_journal.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection(DBConfig(path=str(db_config["path"])))
    version = apply_migrations(conn)
    tables = list_tables(conn)
    print(f"OK: Schema at version {version} -> {conn.path} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()
