from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Note: plain data object; the attendance core only ever sees `student_id`.
    """

    student_id: str
    name: str
    username: str
    password_hash: Optional[str] = None
    classroom: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.student_id, "name": self.name, "username": self.username, "classroom": self.classroom}


@dataclass(frozen=True)
class Teacher:
    teacher_id: str
    name: str
    username: str
    password_hash: Optional[str] = None
    subject: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.teacher_id, "name": self.name, "username": self.username, "subject": self.subject}


@dataclass(frozen=True)
class Classroom:
    classroom_id: str
    name: str
    capacity: int

    def to_dict(self) -> dict:
        return {"id": self.classroom_id, "name": self.name, "capacity": self.capacity}


@dataclass(frozen=True)
class Course:
    course_id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.course_id, "name": self.name}
