from __future__ import annotations

import math

from ..common.validators import require_non_empty
from .model import CourseSummaryRow, StudentCourseSummaryRow
from .repository import AttendanceLedger, EnrollmentSource


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class AttendanceReporter:
    """Derives attendance summaries from the ledger.

    Nothing is cached: every call rescans the full ledger. The two modes use
    different denominators and serve different consumers, so they are kept
    as separate operations.
    """

    def __init__(self, ledger: AttendanceLedger, roster: EnrollmentSource):
        self._ledger = ledger
        self._roster = roster

    def course_summary(self) -> list[CourseSummaryRow]:
        """Course-wide view (admin/faculty).

        total = enrolled students x sessions recorded for the course, which
        assumes every enrolled student is expected at every session.
        """

        events = self._ledger.events()
        enrolled = len(self._roster.enrolled_student_ids())

        rows: list[CourseSummaryRow] = []
        for course in self._roster.course_names():
            sessions = [e for e in events if e.course == course]
            total = enrolled * len(sessions)
            present = sum(len(e.present_students) for e in sessions)
            percent = 0 if total == 0 else round_half_up(present / total * 100)
            rows.append(CourseSummaryRow(course=course, total=total, present=present, percent=percent))
        return rows

    def student_summary(self, student_id: str) -> list[StudentCourseSummaryRow]:
        """Per-course view for a single student (student dashboard)."""

        student_id = require_non_empty(student_id, "studentId")

        grouped: dict[str, list[int]] = {}
        for e in self._ledger.events():
            s = grouped.setdefault(e.course, [0, 0])
            s[1] += 1
            if student_id in e.present_students:
                s[0] += 1

        rows: list[StudentCourseSummaryRow] = []
        for course, (present, total) in grouped.items():
            percent = f"{present / total * 100:.2f}" if total > 0 else "0.00"
            rows.append(StudentCourseSummaryRow(course=course, present=present, total=total, percent=percent))
        return rows
