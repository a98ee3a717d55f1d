from __future__ import annotations

import copy
import threading
from typing import Any


class InMemoryTimetableRepository:
    """Holds the single published timetable; posting replaces it wholesale."""

    def __init__(self):
        self._lock = threading.Lock()
        self._timetable: Any = {}

    def get(self) -> Any:
        with self._lock:
            return copy.deepcopy(self._timetable)

    def replace(self, timetable: Any) -> None:
        with self._lock:
            self._timetable = copy.deepcopy(timetable)
