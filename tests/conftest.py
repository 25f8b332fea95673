from __future__ import annotations

from typing import Any

import pytest

from src.class_journal.class_journal.container import build_container
from src.class_journal.class_journal.database.bootstrap import apply_migrations
from src.class_journal.class_journal.main import create_app


class EventRecorder:
    """Hub listener that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def __call__(self, event: str, payload: Any) -> None:
        self.events.append((event, payload))

    def named(self, event: str) -> list[Any]:
        return [payload for name, payload in self.events if name == event]


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "journal.db"


@pytest.fixture
def container(db_path):
    c = build_container(db_config={"path": str(db_path)})
    apply_migrations(c.conn)
    return c


@pytest.fixture
def events(container):
    recorder = EventRecorder()
    container.hub.subscribe("recorder", recorder)
    return recorder


@pytest.fixture
def app(db_path):
    return create_app(
        {
            "DB_CONFIG": {"path": str(db_path)},
            "TESTING": True,
            "DEBUG": False,
            "AUTO_INIT_DB": True,
            "LOG_LEVEL": "WARNING",
            "LOG_FILE": None,
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app, client):
    socketio = app.extensions["socketio"]
    sc = socketio.test_client(app, flask_test_client=client)
    yield sc
    if sc.is_connected():
        sc.disconnect()
