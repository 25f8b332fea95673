"""Backup database.

Note: uses SQLite's online backup API, so it is safe while the server runs.
"""

from __future__ import annotations

import importlib
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def backup(db_path: str | Path, out_dir: str | Path) -> Path:
    db_path = Path(db_path)
    if not db_path.exists():
        raise SystemExit(f"Database file not found: {db_path}")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{db_path.stem}_{ts}.db"

    src = sqlite3.connect(str(db_path))
    dst = sqlite3.connect(str(out_file))
    try:
        src.backup(dst)
    finally:
        dst.close()
        src.close()
    return out_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    out_file = backup(settings.DB_CONFIG["path"], REPO_ROOT / "backups")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
