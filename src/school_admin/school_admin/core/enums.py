from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role stored in the session after login."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class Audience(str, Enum):
    """Who an announcement is addressed to."""

    ALL = "all"
    STUDENTS = "students"
    FACULTY = "faculty"
