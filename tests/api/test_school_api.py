from __future__ import annotations

import io
from pathlib import Path


def test_roster_lists_and_crud(client):
    assert [s["id"] for s in client.get("/students").get_json()] == ["s1", "s2", "s3"]

    resp = client.post("/students", json={"name": "Student 4"})
    assert resp.status_code == 201
    assert resp.get_json()["student"]["id"] == "s4"

    assert client.delete("/students/s4").status_code == 200
    assert client.delete("/students/s4").status_code == 404
    assert client.post("/students", json={}).status_code == 400

    assert client.post("/classrooms", json={"name": "Room A", "capacity": 25}).status_code == 201
    assert client.get("/classrooms").get_json() == [{"id": "r1", "name": "Room A", "capacity": 25}]
    assert [t["username"] for t in client.get("/teachers").get_json()] == ["teacher1"]


def test_new_course_appears_in_attendance_summary(client):
    client.post("/courses", json={"name": "Biology"})

    rows = client.get("/attendance").get_json()

    assert rows[-1] == {"course": "Biology", "total": 0, "present": 0, "percent": 0}


def test_login_sets_session(client):
    resp = client.post("/login", json={"username": "teacher1", "password": "teacher123", "role": "faculty"})
    assert resp.status_code == 200
    assert resp.get_json()["user"] == {"id": "t1", "name": "Teacher 1", "role": "faculty"}

    assert client.get("/me").get_json()["id"] == "t1"

    client.post("/logout")
    assert client.get("/me").status_code == 401


def test_login_failure(client):
    resp = client.post("/login", json={"username": "teacher1", "password": "bad", "role": "faculty"})

    assert resp.status_code == 401


def test_timetable_round_trip(client):
    assert client.post("/generate_timetable", json={}).get_json() == {"error": "timetableData is required"}

    data = {"Monday": [{"time": "09:00", "course": "Physics"}]}
    resp = client.post("/generate_timetable", json={"timetableData": data})
    assert resp.get_json()["message"] == "Timetable generated successfully"

    assert client.get("/timetable").get_json() == {"timetable": data}
    assert client.get("/student/timetable").get_json() == {"timetable": data}


def test_announcements(client):
    assert client.post("/announcements", json={"title": "x"}).status_code == 400

    client.post("/announcements", json={"title": "Exam", "message": "Friday", "postedBy": "t1"})
    client.post("/announcements", json={"title": "Meeting", "message": "Monday", "postedBy": "admin", "audience": "faculty"})

    assert [a["title"] for a in client.get("/announcements").get_json()] == ["Meeting", "Exam"]
    assert [a["title"] for a in client.get("/student/announcements").get_json()] == ["Exam"]


def test_note_with_uploaded_file_is_served(client):
    resp = client.post(
        "/notes",
        data={"title": "Week 1", "postedBy": "t1", "file": (io.BytesIO(b"hello"), "week 1.txt")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    note = resp.get_json()["note"]
    assert note["fileUrl"].startswith("http://localhost:8000/uploads/")
    assert note["fileUrl"].endswith("-week_1.txt")

    filename = note["fileUrl"].rsplit("/", 1)[1]
    served = client.get(f"/uploads/{filename}")
    assert served.data == b"hello"
    served.close()

    assert client.get("/student/notes").get_json()[0]["title"] == "Week 1"


def test_note_without_file_and_missing_fields(client):
    ok = client.post("/notes", json={"title": "Reading", "postedBy": "t1"})
    assert ok.get_json()["note"]["fileUrl"] is None

    assert client.post("/notes", json={"title": "Reading"}).status_code == 400


def test_assignments(client):
    assert client.post("/assignments", json={"title": "HW", "postedBy": "t1"}).status_code == 400

    resp = client.post("/assignments", json={"title": "HW", "postedBy": "t1", "dueDate": "2024-02-01"})
    assert resp.get_json()["assignment"]["dueDate"] == "2024-02-01"
    assert len(client.get("/student/assignments").get_json()) == 1


def test_assignment_with_bad_due_date_stores_no_file(app, client):
    resp = client.post(
        "/assignments",
        data={"title": "HW", "postedBy": "t1", "dueDate": "next week", "file": (io.BytesIO(b"x"), "hw.txt")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
    folder = Path(app.config["UPLOAD_FOLDER"])
    assert not folder.exists() or list(folder.iterdir()) == []
    assert client.get("/assignments").get_json() == []
