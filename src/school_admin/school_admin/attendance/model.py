from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceEvent:
    """One attendance-taking session for a course on a date (a ledger entry)."""

    event_id: int
    course: str
    date: date
    present_students: tuple  # opaque ids, stored exactly as given
    recorded_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "course": self.course,
            "date": self.date.strftime("%Y-%m-%d"),
            "presentStudents": list(self.present_students),
            "recordedAt": self.recorded_at.isoformat(timespec="seconds") if self.recorded_at else None,
        }


@dataclass(frozen=True)
class CourseSummaryRow:
    """Course-wide attendance row: slots = enrolled students x sessions."""

    course: str
    total: int
    present: int
    percent: int

    def to_dict(self) -> dict:
        return {"course": self.course, "total": self.total, "present": self.present, "percent": self.percent}


@dataclass(frozen=True)
class StudentCourseSummaryRow:
    """Single-student attendance row: sessions attended out of sessions held."""

    course: str
    present: int
    total: int
    percent: str

    def to_dict(self) -> dict:
        return {"course": self.course, "present": self.present, "total": self.total, "percent": self.percent}
