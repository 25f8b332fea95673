from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from ..core.constants import DEFAULT_CONNECT_TIMEOUT


@dataclass
class DBConfig:
    path: str
    timeout: float = DEFAULT_CONNECT_TIMEOUT


class DatabaseConnection:
    """DB connection factory.

    Note: We create short-lived connections per operation; SQLite serializes
    writers through its file lock, so no pool is kept.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def path(self) -> str:
        return self._config.path

    def connect(self) -> sqlite3.Connection:
        Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._config.path, timeout=self._config.timeout)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn
