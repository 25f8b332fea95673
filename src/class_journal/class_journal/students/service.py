from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_fields, require_int, require_non_empty
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..realtime.hub import STUDENT_ADDED, STUDENT_DELETED, Publisher
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use cases: list, create, delete and batch-create students.

    Every confirmed mutation is announced on the publisher.
    """

    def __init__(self, students: StudentRepository, publisher: Publisher):
        self._students = students
        self._publisher = publisher

    async def list_students(self) -> list[dict]:
        students = await self._students.list_by_name()
        return [s.to_dict() for s in students]

    async def create_student(self, name: Any, group: Any, course: Any) -> dict:
        require_fields({"name": name, "group": group, "course": course}, "name", "group", "course")
        name = require_non_empty(name, "name")
        group = require_non_empty(group, "group")
        course = require_int(course, "course")

        logger.info("Adding student: name=%s group=%s course=%s", name, group, course)
        student_id = await self._students.create(name=name, group=group, course=course)

        student = await self._students.get_by_id(student_id)
        if not student:
            raise StoreError(f"Inserted student {student_id} could not be read back")

        data = student.to_dict()
        self._publisher.publish(STUDENT_ADDED, data)
        return data

    async def delete_student(self, student_id: Any) -> dict:
        student_id = require_int(student_id, "id")
        logger.info("Deleting student: %s", student_id)

        if not await self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        await self._students.delete_with_attendance(student_id)
        self._publisher.publish(STUDENT_DELETED, student_id)
        return {"deletedId": student_id, "message": "Student deleted successfully"}

    async def batch_create_students(self, items: Any) -> dict:
        if not isinstance(items, list):
            raise ValidationError("Missing or invalid students list")

        logger.info("Batch adding %d students", len(items))
        results: list[dict] = []
        added = errors = 0

        for item in items:
            try:
                if not isinstance(item, dict):
                    raise ValidationError("Student entry must be an object")
                results.append(await self.create_student(item.get("name"), item.get("group"), item.get("course")))
                added += 1
            except (ValidationError, StoreError) as e:
                logger.warning("Error adding student %r: %s", item, e)
                results.append({"error": str(e), "student": item})
                errors += 1

        return {"success": True, "added": added, "errors": errors, "results": results}
