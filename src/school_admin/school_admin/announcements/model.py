from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Audience


@dataclass(frozen=True)
class Announcement:
    announcement_id: int
    title: str
    message: str
    posted_by: str
    audience: Audience
    posted_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.announcement_id,
            "title": self.title,
            "message": self.message,
            "postedBy": self.posted_by,
            "audience": self.audience.value,
            "date": self.posted_at.isoformat(timespec="seconds"),
        }
