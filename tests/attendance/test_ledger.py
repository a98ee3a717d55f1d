from __future__ import annotations

from datetime import date, datetime

import pytest

from src.school_admin.school_admin.attendance.ledger import InMemoryAttendanceLedger
from src.school_admin.school_admin.core.exceptions import ValidationError


def _ledger():
    return InMemoryAttendanceLedger(clock=lambda: datetime(2024, 1, 1, 9, 0))


def test_record_appends_events_in_insertion_order():
    ledger = _ledger()

    ledger.record("Mathematics", "2024-01-01", ["s1"])
    ledger.record("Physics", "2024-01-01", [])
    ledger.record("Mathematics", "2024-01-02", ["s1", "s2"])

    events = ledger.events()
    assert len(ledger) == 3
    assert [e.event_id for e in events] == [1, 2, 3]
    assert [e.course for e in events] == ["Mathematics", "Physics", "Mathematics"]
    assert events[2].date == date(2024, 1, 2)
    assert events[2].present_students == ("s1", "s2")


def test_same_course_and_date_twice_creates_two_events():
    ledger = _ledger()

    ledger.record("Physics", "2024-01-01", ["s1"])
    ledger.record("Physics", "2024-01-01", ["s2"])

    assert len(ledger.events_for_course("Physics")) == 2


def test_record_rejects_non_list_present_students_and_leaves_ledger_unchanged():
    ledger = _ledger()
    ledger.record("Physics", "2024-01-01", ["s1"])

    with pytest.raises(ValidationError):
        ledger.record("Physics", "2024-01-02", "s1")

    assert len(ledger) == 1


@pytest.mark.parametrize(
    "course, work_date, present",
    [
        (None, "2024-01-01", ["s1"]),
        ("", "2024-01-01", ["s1"]),
        ("Physics", None, ["s1"]),
        ("Physics", "01/02/2024", ["s1"]),
        ("Physics", "2024-01-01", None),
    ],
)
def test_record_validation_errors(course, work_date, present):
    ledger = _ledger()

    with pytest.raises(ValidationError):
        ledger.record(course, work_date, present)

    assert ledger.events() == []


def test_record_serialises_like_the_api_payload():
    event = _ledger().record("Physics", "2024-01-01", ["s1", "s2"])

    assert event.to_dict() == {
        "id": 1,
        "course": "Physics",
        "date": "2024-01-01",
        "presentStudents": ["s1", "s2"],
        "recordedAt": "2024-01-01T09:00:00",
    }


def test_student_ids_are_stored_as_given():
    ledger = _ledger()

    event = ledger.record("Physics", "2024-01-01", [1, 2, " s3"])

    assert event.present_students == (1, 2, " s3")
