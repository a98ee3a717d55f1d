from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import Assignment, Attachment, Note
from .repository import InMemoryMaterialsRepository

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class MaterialsService:
    """Use case: faculty share notes and assignments with students."""

    def __init__(self, materials: InMemoryMaterialsRepository):
        self._materials = materials

    def share_note(
        self,
        *,
        title: Any,
        posted_by: Any,
        description: Any = None,
        attachment: Optional[Attachment] = None,
    ) -> Note:
        if not title or not posted_by:
            raise ValidationError("title and postedBy are required")

        note = self._materials.create_note(
            title=require_non_empty(title, "title"),
            description=_text(description),
            posted_by=require_non_empty(posted_by, "postedBy"),
            posted_at=now_local(),
            attachment=attachment,
        )
        logger.info("note shared id=%s attachment=%s", note.note_id, attachment.filename if attachment else None)
        return note

    def post_assignment(
        self,
        *,
        title: Any,
        due_date: Any,
        posted_by: Any,
        description: Any = None,
        course: Any = None,
        attachment: Optional[Attachment] = None,
    ) -> Assignment:
        if not title or not due_date or not posted_by:
            raise ValidationError("title, dueDate and postedBy are required")

        item = self._materials.create_assignment(
            title=require_non_empty(title, "title"),
            description=_text(description),
            due_date=parse_iso_date(due_date, "dueDate"),
            posted_by=require_non_empty(posted_by, "postedBy"),
            posted_at=now_local(),
            course=_text(course) or None,
            attachment=attachment,
        )
        logger.info("assignment posted id=%s due=%s", item.assignment_id, item.due_date)
        return item

    def list_notes(self) -> list[Note]:
        return self._materials.list_notes()

    def list_assignments(self) -> list[Assignment]:
        return self._materials.list_assignments()
