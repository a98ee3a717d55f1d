from __future__ import annotations

from typing import Any, Protocol, Sequence

from .model import AttendanceEvent


class AttendanceLedger(Protocol):
    """Append-only log of attendance events.

    Note: there is no update/delete on purpose; events live for the process lifetime.
    """

    def record(self, course: Any, date: Any, present_students: Any) -> AttendanceEvent:
        raise NotImplementedError

    def events(self) -> Sequence[AttendanceEvent]:
        """Snapshot of all events in insertion order."""

        raise NotImplementedError

    def events_for_course(self, course: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError


class EnrollmentSource(Protocol):
    """Read-only view of the roster needed by the reporter."""

    def enrolled_student_ids(self) -> Sequence[str]:
        raise NotImplementedError

    def course_names(self) -> Sequence[str]:
        raise NotImplementedError
