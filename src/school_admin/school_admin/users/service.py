from __future__ import annotations

import logging
from typing import Any, Optional

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..roster.repository import RosterRepository
from .model import AdminAccount, SessionUser

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate admin, faculty or student (login)."""

    def __init__(self, roster: RosterRepository, *, admin: Optional[AdminAccount] = None):
        self._roster = roster
        self._admin = admin

    @staticmethod
    def _password_ok(password_hash: Optional[str], password: str) -> bool:
        if not password_hash:
            return False
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            return False

    def authenticate(self, username: Any, password: Any, role: Any) -> SessionUser:
        if not username or not password or not role:
            raise ValidationError("username, password, role required")
        try:
            role = Role(str(role).lower())
        except ValueError:
            raise ValidationError("role must be one of admin, faculty, student")

        user: Optional[SessionUser] = None
        if role == Role.ADMIN:
            if self._admin and username == self._admin.username and self._password_ok(self._admin.password_hash, password):
                user = SessionUser(user_id="admin", name="Administrator", role=Role.ADMIN)
        elif role == Role.FACULTY:
            t = self._roster.get_teacher_by_username(username)
            if t and self._password_ok(t.password_hash, password):
                user = SessionUser(user_id=t.teacher_id, name=t.name, role=Role.FACULTY)
        else:
            s = self._roster.get_student_by_username(username)
            if s and self._password_ok(s.password_hash, password):
                user = SessionUser(user_id=s.student_id, name=s.name, role=Role.STUDENT)

        if not user:
            logger.warning("failed login username=%s role=%s", username, role.value)
            raise AuthenticationError("Invalid username or password")
        return user
