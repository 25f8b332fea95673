import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", str(REPO_ROOT / "database.db")),
    "timeout": float(os.getenv("DB_TIMEOUT", "5")),
}

DEBUG = True

# Apply schema migrations on startup (idempotent, tracked in PRAGMA user_version)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
