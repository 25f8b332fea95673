from __future__ import annotations

from flask import Flask, jsonify

from ..common.request import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.entry_service

    @app.route("/api/entries", methods=["GET"], endpoint="list_entries")
    async def list_entries():
        return jsonify(await service.list_entries())

    @app.route("/api/entries", methods=["POST"], endpoint="create_entry")
    async def create_entry():
        data = json_body()
        return jsonify(await service.create_entry(data.get("name"), data.get("date"), data.get("note")))

    @app.route("/api/entries/<int:entry_id>", methods=["PUT"], endpoint="update_entry")
    async def update_entry(entry_id: int):
        data = json_body()
        return jsonify(await service.update_entry(entry_id, data.get("name"), data.get("date"), data.get("note")))

    @app.route("/api/entries/<int:entry_id>", methods=["DELETE"], endpoint="delete_entry")
    async def delete_entry(entry_id: int):
        return jsonify(await service.delete_entry(entry_id))
