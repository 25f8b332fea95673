from __future__ import annotations


def _add_student(client, name="Anna", group="CS-101", course=1):
    response = client.post("/api/students", json={"name": name, "group": group, "course": course})
    assert response.status_code == 200
    return response.get_json()


def test_health_reports_database(client):
    body = client.get("/api/health").get_json()
    assert body["status"] == "OK"
    assert body["database"] == "Connected"
    assert body["timestamp"].endswith("Z")


def test_student_lifecycle(client):
    anna = _add_student(client, "Anna")
    _add_student(client, "Boris", course=0)

    listed = client.get("/api/students").get_json()
    assert [s["name"] for s in listed] == ["Anna", "Boris"]
    assert listed[1]["course"] == 0
    assert set(listed[0]) == {"id", "name", "group", "course", "created_at"}

    response = client.delete(f"/api/students/{anna['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"deletedId": anna["id"], "message": "Student deleted successfully"}

    response = client.delete(f"/api/students/{anna['id']}")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Student not found"}


def test_create_student_missing_field_is_400(client):
    response = client.post("/api/students", json={"name": "Anna", "group": "CS-101"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing required fields: name, group, course"}


def test_batch_create(client):
    response = client.post(
        "/api/students/batch",
        json={"students": [{"name": "A", "group": "G", "course": 1}, {"group": "G", "course": 1}]},
    )
    body = response.get_json()
    assert response.status_code == 200
    assert (body["success"], body["added"], body["errors"]) == (True, 1, 1)

    response = client.post("/api/students/batch", json={"students": "nope"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing or invalid students list"}


def test_attendance_upsert_and_views(client):
    anna = _add_student(client)

    response = client.post("/api/attendance", json={"studentId": anna["id"], "date": "2024-01-01", "status": "present"})
    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "studentId": anna["id"],
        "date": "2024-01-01",
        "status": "present",
        "hour": None,
    }
    client.post("/api/attendance", json={"studentId": anna["id"], "date": "2024-01-01", "status": "absent", "hour": 2})

    body = client.get("/api/attendance").get_json()
    sid = str(anna["id"])
    assert body["daily"] == {"2024-01-01": {sid: "present"}}
    assert body["hourly"] == {"2024-01-01": {sid: {"2": "absent"}}}


def test_attendance_errors(client):
    response = client.post("/api/attendance", json={"date": "2024-01-01", "status": "present"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing required fields: studentId, date, status"}

    response = client.post("/api/attendance", json={"studentId": 77, "date": "2024-01-01", "status": "present"})
    assert response.status_code == 404
    assert response.get_json() == {"error": "Student not found"}


def test_entries_endpoints(client):
    created = client.post("/api/entries", json={"name": "n", "date": "2024-01-01", "note": "x"}).get_json()
    assert created["name"] == "n"

    response = client.put(f"/api/entries/{created['id']}", json={"name": "m"})
    assert response.status_code == 200
    assert response.get_json()["name"] == "m"

    assert client.get("/api/entries").get_json()[0]["id"] == created["id"]

    assert client.put("/api/entries/999", json={"name": "m"}).status_code == 404
    assert client.delete(f"/api/entries/{created['id']}").get_json() == {"deletedId": created["id"]}
    response = client.delete(f"/api/entries/{created['id']}")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_entry_store_error_is_500(client):
    response = client.post("/api/entries", json={"date": "2024-01-01"})
    assert response.status_code == 500
    assert "NOT NULL" in response.get_json()["error"]


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Endpoint not found"}


def test_unexpected_error_is_generic_500(app, client, monkeypatch):
    container = app.extensions["class_journal"]

    async def explode():
        raise RuntimeError("secret detail")

    monkeypatch.setattr(container.student_service, "list_students", explode)

    response = client.get("/api/students")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}


def test_batch_with_oversized_course_still_returns_summary(client):
    response = client.post(
        "/api/students/batch",
        json={"students": [{"name": "A", "group": "G", "course": 1}, {"name": "Huge", "group": "G", "course": 10**30}]},
    )
    assert response.status_code == 200
    body = response.get_json()
    assert (body["added"], body["errors"]) == (1, 1)
