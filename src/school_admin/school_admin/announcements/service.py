from __future__ import annotations

import logging
from typing import Any

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import Audience
from ..core.exceptions import ValidationError
from .model import Announcement
from .repository import InMemoryAnnouncementRepository

logger = logging.getLogger(__name__)


class AnnouncementService:
    def __init__(self, announcements: InMemoryAnnouncementRepository):
        self._announcements = announcements

    def post(self, *, title: Any, message: Any, posted_by: Any, audience: Any = None) -> Announcement:
        if not title or not message or not posted_by:
            raise ValidationError("title, message, postedBy required")

        title = require_non_empty(title, "title")
        message = require_non_empty(message, "message")
        posted_by = require_non_empty(posted_by, "postedBy")
        try:
            target = Audience(str(audience).lower()) if audience else Audience.ALL
        except ValueError:
            raise ValidationError("audience must be one of all, students, faculty")

        item = self._announcements.create(
            title=title,
            message=message,
            posted_by=posted_by,
            audience=target,
            posted_at=now_local(),
        )
        logger.info("announcement posted id=%s audience=%s", item.announcement_id, target.value)
        return item

    def list_all(self) -> list[Announcement]:
        return self._announcements.list_all()

    def list_for(self, audience: Audience) -> list[Announcement]:
        """Announcements visible to one audience (targeted ones plus `all`)."""

        return [a for a in self._announcements.list_all() if a.audience in (Audience.ALL, audience)]
