from __future__ import annotations

import logging
from typing import Any

from ..core.exceptions import ValidationError
from .repository import InMemoryTimetableRepository

logger = logging.getLogger(__name__)


class TimetableService:
    def __init__(self, timetables: InMemoryTimetableRepository):
        self._timetables = timetables

    def publish(self, timetable_data: Any) -> Any:
        """Store the timetable exactly as posted by the admin."""

        if not timetable_data:
            raise ValidationError("timetableData is required")
        if not isinstance(timetable_data, (dict, list)):
            raise ValidationError("timetableData must be an object or a list")

        self._timetables.replace(timetable_data)
        logger.info("timetable published entries=%d", len(timetable_data))
        return self._timetables.get()

    def current(self) -> Any:
        return self._timetables.get()
