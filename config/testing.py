import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "path": os.getenv("DB_PATH", str(Path(tempfile.gettempdir()) / "class_journal_test.db")),
    "timeout": 5.0,
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = True

CORS_ORIGINS = "*"

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = None

HOST = "127.0.0.1"
PORT = 3000
