from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import generate_password_hash

from .announcements.repository import InMemoryAnnouncementRepository
from .announcements.service import AnnouncementService
from .attendance.ledger import InMemoryAttendanceLedger
from .attendance.reporter import AttendanceReporter
from .materials.repository import InMemoryMaterialsRepository
from .materials.service import MaterialsService
from .materials.uploads import UploadStorage
from .roster.bootstrap import ensure_demo_roster
from .roster.memory_roster_repository import InMemoryRosterRepository
from .roster.service import RosterService
from .timetable.repository import InMemoryTimetableRepository
from .timetable.service import TimetableService
from .users.model import AdminAccount
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    roster_repo: InMemoryRosterRepository
    attendance_ledger: InMemoryAttendanceLedger
    timetable_repo: InMemoryTimetableRepository
    announcements_repo: InMemoryAnnouncementRepository
    materials_repo: InMemoryMaterialsRepository
    upload_storage: UploadStorage

    roster_service: RosterService
    auth_service: AuthService
    attendance_reporter: AttendanceReporter
    timetable_service: TimetableService
    announcement_service: AnnouncementService
    materials_service: MaterialsService


def build_container(
    *,
    upload_folder: str,
    public_base_url: str,
    admin_username: Optional[str] = None,
    admin_password: Optional[str] = None,
    seed_demo: bool = True,
) -> Container:
    """Wire every store and service for one app instance.

    Stores are plain objects owned by the container, so each app (and each
    test) gets its own isolated state.
    """

    roster_repo = InMemoryRosterRepository()
    if seed_demo:
        ensure_demo_roster(roster_repo)

    attendance_ledger = InMemoryAttendanceLedger()
    timetable_repo = InMemoryTimetableRepository()
    announcements_repo = InMemoryAnnouncementRepository()
    materials_repo = InMemoryMaterialsRepository()
    upload_storage = UploadStorage(upload_folder, base_url=public_base_url)

    admin = None
    if admin_username and admin_password:
        admin = AdminAccount(username=admin_username, password_hash=generate_password_hash(admin_password))

    roster_service = RosterService(roster_repo)
    auth_service = AuthService(roster_repo, admin=admin)
    attendance_reporter = AttendanceReporter(attendance_ledger, roster_service)
    timetable_service = TimetableService(timetable_repo)
    announcement_service = AnnouncementService(announcements_repo)
    materials_service = MaterialsService(materials_repo)

    return Container(
        roster_repo=roster_repo,
        attendance_ledger=attendance_ledger,
        timetable_repo=timetable_repo,
        announcements_repo=announcements_repo,
        materials_repo=materials_repo,
        upload_storage=upload_storage,
        roster_service=roster_service,
        auth_service=auth_service,
        attendance_reporter=attendance_reporter,
        timetable_service=timetable_service,
        announcement_service=announcement_service,
        materials_service=materials_service,
    )
