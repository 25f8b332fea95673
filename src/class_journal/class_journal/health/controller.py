from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import iso_timestamp
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    async def health():
        connected = await container.store.ping()
        return jsonify(
            {
                "status": "OK",
                "timestamp": iso_timestamp(),
                "database": "Connected" if connected else "Disconnected",
            }
        )
