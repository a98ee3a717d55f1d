from __future__ import annotations

import logging
from typing import Any, Optional

from werkzeug.security import generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import DEFAULT_CLASSROOM_CAPACITY, MIN_PASSWORD_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from .model import Classroom, Course, Student, Teacher
from .repository import RosterRepository

logger = logging.getLogger(__name__)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Expected a text value")
    return value.strip() or None


class RosterService:
    """Use case: manage students, teachers, classrooms and courses.

    Also the enrollment source the attendance reporter reads from.
    """

    def __init__(self, roster: RosterRepository):
        self._roster = roster

    # -- reads -------------------------------------------------------------

    def list_students(self) -> list[Student]:
        return list(self._roster.list_students())

    def list_teachers(self) -> list[Teacher]:
        return list(self._roster.list_teachers())

    def list_classrooms(self) -> list[Classroom]:
        return list(self._roster.list_classrooms())

    def list_courses(self) -> list[Course]:
        return list(self._roster.list_courses())

    def enrolled_student_ids(self) -> list[str]:
        return [s.student_id for s in self._roster.list_students()]

    def course_names(self) -> list[str]:
        return [c.name for c in self._roster.list_courses()]

    # -- writes ------------------------------------------------------------

    def _hash_password(self, password: Any) -> Optional[str]:
        if password is None or password == "":
            return None
        if not isinstance(password, str):
            raise ValidationError("password must be text")
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)
        return generate_password_hash(password)

    def _ensure_username_free(self, username: str) -> None:
        if self._roster.get_student_by_username(username) or self._roster.get_teacher_by_username(username):
            raise ValidationError("username already exists")

    def add_student(
        self,
        *,
        name: Any,
        student_id: Any = None,
        username: Any = None,
        password: Any = None,
        classroom: Any = None,
    ) -> Student:
        name = require_non_empty(name, "name")
        sid = _optional_text(student_id) or self._roster.next_id("s")
        if self._roster.get_student(sid):
            raise ValidationError(f"student {sid} already exists")

        username = _optional_text(username) or sid
        self._ensure_username_free(username)

        student = Student(
            student_id=sid,
            name=name,
            username=username,
            password_hash=self._hash_password(password),
            classroom=_optional_text(classroom),
        )
        self._roster.add_student(student)
        logger.info("student added id=%s", sid)
        return student

    def remove_student(self, student_id: str) -> None:
        if not self._roster.delete_student(student_id):
            raise NotFoundError(f"student {student_id} not found")
        logger.info("student removed id=%s", student_id)

    def add_teacher(
        self,
        *,
        name: Any,
        teacher_id: Any = None,
        username: Any = None,
        password: Any = None,
        subject: Any = None,
    ) -> Teacher:
        name = require_non_empty(name, "name")
        tid = _optional_text(teacher_id) or self._roster.next_id("t")
        if self._roster.get_teacher(tid):
            raise ValidationError(f"teacher {tid} already exists")

        username = _optional_text(username) or tid
        self._ensure_username_free(username)

        teacher = Teacher(
            teacher_id=tid,
            name=name,
            username=username,
            password_hash=self._hash_password(password),
            subject=_optional_text(subject),
        )
        self._roster.add_teacher(teacher)
        logger.info("teacher added id=%s", tid)
        return teacher

    def remove_teacher(self, teacher_id: str) -> None:
        if not self._roster.delete_teacher(teacher_id):
            raise NotFoundError(f"teacher {teacher_id} not found")
        logger.info("teacher removed id=%s", teacher_id)

    def add_classroom(self, *, name: Any, capacity: Any = None) -> Classroom:
        name = require_non_empty(name, "name")
        if any(c.name == name for c in self._roster.list_classrooms()):
            raise ValidationError(f"classroom {name} already exists")

        if capacity is None or capacity == "":
            capacity = DEFAULT_CLASSROOM_CAPACITY
        try:
            capacity = int(capacity)
        except (TypeError, ValueError):
            raise ValidationError("capacity must be a number")
        if capacity <= 0:
            raise ValidationError("capacity must be positive")

        classroom = Classroom(classroom_id=self._roster.next_id("r"), name=name, capacity=capacity)
        self._roster.add_classroom(classroom)
        return classroom

    def remove_classroom(self, classroom_id: str) -> None:
        if not self._roster.delete_classroom(classroom_id):
            raise NotFoundError(f"classroom {classroom_id} not found")

    def add_course(self, *, name: Any) -> Course:
        name = require_non_empty(name, "name")
        if name in self.course_names():
            raise ValidationError(f"course {name} already exists")

        course = Course(course_id=self._roster.next_id("c"), name=name)
        self._roster.add_course(course)
        return course
