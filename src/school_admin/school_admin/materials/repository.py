from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional

from .model import Assignment, Attachment, Note


class InMemoryMaterialsRepository:
    """Notes and assignments, each kept newest first."""

    def __init__(self):
        self._lock = threading.Lock()
        self._notes: list[Note] = []
        self._assignments: list[Assignment] = []
        self._next_note_id = 1
        self._next_assignment_id = 1

    def create_note(
        self,
        *,
        title: str,
        description: str,
        posted_by: str,
        posted_at: datetime,
        attachment: Optional[Attachment] = None,
    ) -> Note:
        with self._lock:
            note = Note(
                note_id=self._next_note_id,
                title=title,
                description=description,
                posted_by=posted_by,
                posted_at=posted_at,
                attachment=attachment,
            )
            self._next_note_id += 1
            self._notes.insert(0, note)
            return note

    def list_notes(self) -> list[Note]:
        with self._lock:
            return list(self._notes)

    def create_assignment(
        self,
        *,
        title: str,
        description: str,
        due_date: date,
        posted_by: str,
        posted_at: datetime,
        course: Optional[str] = None,
        attachment: Optional[Attachment] = None,
    ) -> Assignment:
        with self._lock:
            item = Assignment(
                assignment_id=self._next_assignment_id,
                title=title,
                description=description,
                due_date=due_date,
                posted_by=posted_by,
                posted_at=posted_at,
                course=course,
                attachment=attachment,
            )
            self._next_assignment_id += 1
            self._assignments.insert(0, item)
            return item

    def list_assignments(self) -> list[Assignment]:
        with self._lock:
            return list(self._assignments)
