from __future__ import annotations

from flask import Flask, jsonify

from ..common.request import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="get_attendance")
    async def get_attendance():
        return jsonify(await service.get_all_attendance())

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    async def record_attendance():
        data = json_body()
        result = await service.record_attendance(
            data.get("studentId"),
            data.get("date"),
            data.get("status"),
            hour=data.get("hour"),
        )
        return jsonify(result)
