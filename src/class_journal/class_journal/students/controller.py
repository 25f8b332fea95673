from __future__ import annotations

from flask import Flask, jsonify

from ..common.request import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    async def list_students():
        return jsonify(await service.list_students())

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    async def create_student():
        data = json_body()
        student = await service.create_student(data.get("name"), data.get("group"), data.get("course"))
        return jsonify(student)

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    async def delete_student(student_id: int):
        return jsonify(await service.delete_student(student_id))

    @app.route("/api/students/batch", methods=["POST"], endpoint="batch_create_students")
    async def batch_create_students():
        data = json_body()
        return jsonify(await service.batch_create_students(data.get("students")))
