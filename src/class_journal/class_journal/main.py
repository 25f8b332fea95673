from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.errors import register_error_handlers
from .common.log import configure_logging
from .core.constants import DEFAULT_PORT
from .container import build_container
from .database.bootstrap import apply_migrations, list_tables
from .entries.controller import register as register_entries
from .health.controller import register as register_health
from .realtime.controller import register as register_realtime
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "TESTING",
    "AUTO_INIT_DB",
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "LOG_FILE",
    "HOST",
    "PORT",
)


def load_settings(overrides: Optional[dict] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def _cors_origins(value: Any):
    if isinstance(value, str):
        origins = [o.strip() for o in value.split(",") if o.strip()]
        return "*" if origins in ([], ["*"]) else origins
    return value


def create_app(overrides: Optional[dict] = None) -> Flask:
    """Build the Flask app, its Socket.IO server and the service container.

    Schema migrations run here, before any route is registered, so the app
    never serves against an old schema.
    """

    load_dotenv(override=False)
    settings = load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"), settings.get("LOG_FILE"))

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["HOST"] = settings.get("HOST", "0.0.0.0")
    app.config["PORT"] = int(settings.get("PORT", DEFAULT_PORT))

    db_config = dict(settings["DB_CONFIG"])
    container = build_container(db_config=db_config)

    if settings.get("AUTO_INIT_DB", True):
        version = apply_migrations(container.conn)
        logger.info("Schema ready (version=%s, tables=%s)", version, ", ".join(list_tables(container.conn)))

    origins = _cors_origins(settings.get("CORS_ORIGINS", "*"))
    CORS(app, resources={r"/api/*": {"origins": origins}})
    socketio = SocketIO(app, cors_allowed_origins=origins, async_mode="threading")

    register_students(app, container)
    register_attendance(app, container)
    register_entries(app, container)
    register_health(app, container)
    register_realtime(socketio, container)
    register_error_handlers(app)

    app.extensions["class_journal"] = container
    logger.info("Database file: %s (settings=%s)", container.conn.path, settings["SETTINGS_MODULE"])
    return app
