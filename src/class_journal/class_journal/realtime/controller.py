from __future__ import annotations

import logging
from typing import Any

from flask import request
from flask_socketio import SocketIO, emit

from ..container import Container
from .hub import DOMAIN_EVENTS

logger = logging.getLogger(__name__)

CLIENT_MESSAGE = "client_message"
CLIENT_PREFIX = "client:"
RELAY_REJECTED = "relay_rejected"


def register(socketio: SocketIO, container: Container) -> None:
    """Wire Socket.IO connections to the event hub.

    Each connection subscribes on connect and unsubscribes on disconnect.
    Domain events only ever originate from services; clients talk to each
    other through ``client_message``, relayed under the ``client:`` prefix.
    """

    hub = container.hub

    def _forward_to(sid: str):
        def listener(event: str, payload: Any) -> None:
            if payload is None:
                socketio.emit(event, to=sid)
            else:
                socketio.emit(event, payload, to=sid)

        return listener

    @socketio.on("connect")
    def on_connect(auth=None):
        hub.subscribe(request.sid, _forward_to(request.sid))
        logger.info("Socket connected: %s", request.sid)

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        hub.unsubscribe(request.sid)
        logger.info("Socket disconnected: %s", request.sid)

    def _reject(event: str):
        def handler(data=None):
            logger.warning("Ignoring client-sent %s from %s: %r", event, request.sid, data)
            emit(RELAY_REJECTED, {"event": event, "reason": "domain events are emitted by the server only"})

        return handler

    for event in sorted(DOMAIN_EVENTS):
        socketio.on_event(event, _reject(event))

    @socketio.on(CLIENT_MESSAGE)
    def on_client_message(data=None):
        kind = data.get("type") if isinstance(data, dict) else None
        if not isinstance(kind, str) or not kind.strip():
            emit(RELAY_REJECTED, {"event": CLIENT_MESSAGE, "reason": "payload must be an object with a non-empty 'type'"})
            return

        logger.info("Relaying %s%s from %s", CLIENT_PREFIX, kind.strip(), request.sid)
        hub.publish(f"{CLIENT_PREFIX}{kind.strip()}", data.get("data"), exclude=request.sid)
