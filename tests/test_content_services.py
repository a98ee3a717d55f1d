from __future__ import annotations

from datetime import date

import pytest

from src.school_admin.school_admin.announcements.repository import InMemoryAnnouncementRepository
from src.school_admin.school_admin.announcements.service import AnnouncementService
from src.school_admin.school_admin.core.enums import Audience
from src.school_admin.school_admin.core.exceptions import ValidationError
from src.school_admin.school_admin.materials.model import Attachment
from src.school_admin.school_admin.materials.repository import InMemoryMaterialsRepository
from src.school_admin.school_admin.materials.service import MaterialsService
from src.school_admin.school_admin.timetable.repository import InMemoryTimetableRepository
from src.school_admin.school_admin.timetable.service import TimetableService


def test_announcements_newest_first_and_targeted():
    svc = AnnouncementService(InMemoryAnnouncementRepository())

    svc.post(title="Exam", message="Friday", posted_by="t1")
    svc.post(title="Staff meeting", message="Monday", posted_by="admin", audience="faculty")
    svc.post(title="Trip", message="Zoo", posted_by="t1", audience="students")

    assert [a.title for a in svc.list_all()] == ["Trip", "Staff meeting", "Exam"]
    assert [a.title for a in svc.list_for(Audience.STUDENTS)] == ["Trip", "Exam"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"title": "", "message": "m", "posted_by": "t1"},
        {"title": "t", "message": None, "posted_by": "t1"},
        {"title": "t", "message": "m", "posted_by": "t1", "audience": "parents"},
    ],
)
def test_announcement_validation(kwargs):
    svc = AnnouncementService(InMemoryAnnouncementRepository())

    with pytest.raises(ValidationError):
        svc.post(**kwargs)
    assert svc.list_all() == []


def test_note_keeps_attachment_reference_opaque():
    svc = MaterialsService(InMemoryMaterialsRepository())
    attachment = Attachment(filename="1-2-notes.pdf", url="http://localhost:8000/uploads/1-2-notes.pdf")

    note = svc.share_note(title="Week 1", posted_by="t1", attachment=attachment)

    assert note.attachment == attachment
    assert note.to_dict()["fileUrl"] == attachment.url
    assert note.to_dict()["description"] == ""


def test_assignment_requires_valid_due_date():
    svc = MaterialsService(InMemoryMaterialsRepository())

    with pytest.raises(ValidationError):
        svc.post_assignment(title="HW1", due_date="next week", posted_by="t1")

    item = svc.post_assignment(title="HW1", due_date="2024-02-01", posted_by="t1", course="Physics")
    assert item.due_date == date(2024, 2, 1)
    assert svc.list_assignments() == [item]


def test_timetable_replaced_wholesale():
    svc = TimetableService(InMemoryTimetableRepository())

    svc.publish({"Monday": ["Mathematics"]})
    svc.publish({"Tuesday": ["Physics"]})

    assert svc.current() == {"Tuesday": ["Physics"]}


@pytest.mark.parametrize("data", [None, {}, "Monday"])
def test_timetable_requires_data(data):
    svc = TimetableService(InMemoryTimetableRepository())

    with pytest.raises(ValidationError):
        svc.publish(data)
