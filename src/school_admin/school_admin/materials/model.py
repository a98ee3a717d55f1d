from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Attachment:
    """Opaque reference to an uploaded file; never interpreted by the services."""

    filename: str
    url: str


@dataclass(frozen=True)
class Note:
    note_id: int
    title: str
    description: str
    posted_by: str
    posted_at: datetime
    attachment: Optional[Attachment] = None

    def to_dict(self) -> dict:
        return {
            "id": self.note_id,
            "title": self.title,
            "description": self.description,
            "fileUrl": self.attachment.url if self.attachment else None,
            "postedBy": self.posted_by,
            "date": self.posted_at.isoformat(timespec="seconds"),
        }


@dataclass(frozen=True)
class Assignment:
    assignment_id: int
    title: str
    description: str
    due_date: date
    posted_by: str
    posted_at: datetime
    course: Optional[str] = None
    attachment: Optional[Attachment] = None

    def to_dict(self) -> dict:
        return {
            "id": self.assignment_id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.strftime("%Y-%m-%d"),
            "course": self.course,
            "fileUrl": self.attachment.url if self.attachment else None,
            "postedBy": self.posted_by,
            "date": self.posted_at.isoformat(timespec="seconds"),
        }
