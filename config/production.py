import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", str(REPO_ROOT / "database.db")),
    "timeout": float(os.getenv("DB_TIMEOUT", "5")),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", str(REPO_ROOT / "logs" / "class_journal.log"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
