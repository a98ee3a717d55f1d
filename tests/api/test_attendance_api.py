from __future__ import annotations


def _physics(rows):
    return next(r for r in rows if r["course"] == "Physics")


def test_record_then_course_summary(client):
    resp = client.post(
        "/attendance",
        json={"course": "Physics", "date": "2024-01-01", "presentStudents": ["s1", "s2"]},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Attendance recorded"
    assert body["record"]["presentStudents"] == ["s1", "s2"]

    assert _physics(client.get("/attendance").get_json()) == {
        "course": "Physics",
        "total": 3,
        "present": 2,
        "percent": 67,
    }

    client.post("/attendance", json={"course": "Physics", "date": "2024-01-02", "presentStudents": ["s1"]})
    assert _physics(client.get("/attendance").get_json()) == {
        "course": "Physics",
        "total": 6,
        "present": 3,
        "percent": 50,
    }


def test_invalid_record_returns_400_and_does_not_mutate(client):
    resp = client.post("/attendance", json={"course": "Physics", "date": "2024-01-01", "presentStudents": "s1"})

    assert resp.status_code == 400
    assert "presentStudents" in resp.get_json()["error"]
    assert _physics(client.get("/attendance").get_json())["total"] == 0


def test_missing_body_is_rejected(client):
    resp = client.post("/attendance", data="not json", content_type="text/plain")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "course, date, presentStudents required"


def test_student_attendance_without_id_is_course_wide(client):
    client.post("/attendance", json={"course": "Mathematics", "date": "2024-01-01", "presentStudents": ["s1"]})

    rows = client.get("/student/attendance").get_json()

    assert [r["course"] for r in rows] == ["Mathematics", "Physics", "Chemistry"]
    assert rows[0] == {"course": "Mathematics", "total": 3, "present": 1, "percent": 33}


def test_student_attendance_for_one_student(client):
    client.post("/attendance", json={"course": "Mathematics", "date": "2024-01-01", "presentStudents": ["s1"]})
    client.post("/attendance", json={"course": "Mathematics", "date": "2024-01-02", "presentStudents": ["s2"]})

    rows = client.get("/student/attendance?studentId=s1").get_json()

    assert rows == [{"course": "Mathematics", "present": 1, "total": 2, "percent": "50.00"}]


def test_student_attendance_blank_id_is_rejected(client):
    resp = client.get("/student/attendance?studentId=")

    assert resp.status_code == 400


def test_each_app_has_its_own_ledger(app, tmp_path):
    from src.school_admin.school_admin.main import create_app

    other = create_app("config.testing", UPLOAD_FOLDER=str(tmp_path / "other")).test_client()
    app.test_client().post("/attendance", json={"course": "Physics", "date": "2024-01-01", "presentStudents": ["s1"]})

    assert _physics(other.get("/attendance").get_json())["total"] == 0


def test_numeric_student_ids_are_accepted(client):
    resp = client.post("/attendance", json={"course": "Physics", "date": "2024-01-01", "presentStudents": [1, 2]})

    assert resp.status_code == 200
    assert resp.get_json()["record"]["presentStudents"] == [1, 2]
    assert _physics(client.get("/attendance").get_json())["present"] == 2
