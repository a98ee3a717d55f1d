from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Classroom, Course, Student, Teacher


class RosterRepository(Protocol):
    """Repository interface for roster entities.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_student(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_student_by_username(self, username: str) -> Optional[Student]:
        raise NotImplementedError

    def add_student(self, student: Student) -> None:
        raise NotImplementedError

    def delete_student(self, student_id: str) -> bool:
        raise NotImplementedError

    def list_teachers(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        raise NotImplementedError

    def get_teacher_by_username(self, username: str) -> Optional[Teacher]:
        raise NotImplementedError

    def add_teacher(self, teacher: Teacher) -> None:
        raise NotImplementedError

    def delete_teacher(self, teacher_id: str) -> bool:
        raise NotImplementedError

    def list_classrooms(self) -> Sequence[Classroom]:
        raise NotImplementedError

    def add_classroom(self, classroom: Classroom) -> None:
        raise NotImplementedError

    def delete_classroom(self, classroom_id: str) -> bool:
        raise NotImplementedError

    def list_courses(self) -> Sequence[Course]:
        raise NotImplementedError

    def add_course(self, course: Course) -> None:
        raise NotImplementedError

    def next_id(self, prefix: str) -> str:
        """Next free identifier such as 's4' or 'c4'."""

        raise NotImplementedError
