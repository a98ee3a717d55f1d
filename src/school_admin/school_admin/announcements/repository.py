from __future__ import annotations

import threading
from datetime import datetime

from ..core.enums import Audience
from .model import Announcement


class InMemoryAnnouncementRepository:
    """Announcements kept newest first."""

    def __init__(self):
        self._lock = threading.Lock()
        self._items: list[Announcement] = []
        self._next_id = 1

    def create(self, *, title: str, message: str, posted_by: str, audience: Audience, posted_at: datetime) -> Announcement:
        with self._lock:
            item = Announcement(
                announcement_id=self._next_id,
                title=title,
                message=message,
                posted_by=posted_by,
                audience=audience,
                posted_at=posted_at,
            )
            self._next_id += 1
            self._items.insert(0, item)
            return item

    def list_all(self) -> list[Announcement]:
        with self._lock:
            return list(self._items)
