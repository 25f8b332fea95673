from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, Protocol

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]

STUDENT_ADDED = "student_added"
STUDENT_DELETED = "student_deleted"
ATTENDANCE_UPDATED = "attendance_updated"
REFRESH = "refresh"

DOMAIN_EVENTS = frozenset({STUDENT_ADDED, STUDENT_DELETED, ATTENDANCE_UPDATED, REFRESH})


class Publisher(Protocol):
    """What services depend on: a place to announce confirmed mutations."""

    def publish(self, event: str, payload: Any = None, *, exclude: Optional[Hashable] = None) -> None:
        raise NotImplementedError


class EventHub(Publisher):
    """In-process publish/subscribe fan-out.

    Subscribers are keyed (a Socket.IO sid, a test recorder, ...) so a
    connection can unsubscribe on disconnect and a relay can skip its sender.
    """

    def __init__(self) -> None:
        self._listeners: Dict[Hashable, Listener] = {}
        self._lock = threading.Lock()

    def subscribe(self, key: Hashable, listener: Listener) -> None:
        with self._lock:
            self._listeners[key] = listener

    def unsubscribe(self, key: Hashable) -> bool:
        with self._lock:
            return self._listeners.pop(key, None) is not None

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def publish(self, event: str, payload: Any = None, *, exclude: Optional[Hashable] = None) -> None:
        with self._lock:
            targets = [(k, fn) for k, fn in self._listeners.items() if k != exclude]

        for key, listener in targets:
            try:
                listener(event, payload)
            except Exception:
                # A failing listener does not stop delivery to the others.
                logger.exception("Listener %r failed on %s", key, event)

