from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_list, require_non_empty
from ..core.exceptions import ValidationError
from .model import AttendanceEvent

logger = logging.getLogger(__name__)


class InMemoryAttendanceLedger:
    """Process-local ledger guarded by a single lock.

    Readers copy the event list under the lock, so a report either sees an
    append in full or not at all.
    """

    def __init__(self, *, clock: Optional[Callable] = None):
        self._events: list[AttendanceEvent] = []
        self._lock = threading.Lock()
        self._next_id = 1
        self._clock = clock or now_local

    def record(self, course: Any, date: Any, present_students: Any) -> AttendanceEvent:
        if course is None or date is None or present_students is None:
            raise ValidationError("course, date, presentStudents required")

        course = require_non_empty(course, "course")
        work_date = parse_iso_date(date, "date")
        students = require_list(present_students, "presentStudents")

        with self._lock:
            event = AttendanceEvent(
                event_id=self._next_id,
                course=course,
                date=work_date,
                present_students=tuple(students),
                recorded_at=self._clock(),
            )
            self._events.append(event)
            self._next_id += 1

        logger.info("attendance recorded course=%s date=%s present=%d", course, event.date, len(students))
        return event

    def events(self) -> list[AttendanceEvent]:
        with self._lock:
            return list(self._events)

    def events_for_course(self, course: str) -> list[AttendanceEvent]:
        return [e for e in self.events() if e.course == course]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
