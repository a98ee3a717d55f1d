from __future__ import annotations

import threading
from typing import Optional

from .model import Classroom, Course, Student, Teacher


class InMemoryRosterRepository:
    """Roster kept in insertion-ordered dicts for the lifetime of the process."""

    def __init__(self):
        self._lock = threading.Lock()
        self._students: dict[str, Student] = {}
        self._teachers: dict[str, Teacher] = {}
        self._classrooms: dict[str, Classroom] = {}
        self._courses: dict[str, Course] = {}

    def list_students(self) -> list[Student]:
        with self._lock:
            return list(self._students.values())

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get(student_id)

    def get_student_by_username(self, username: str) -> Optional[Student]:
        return next((s for s in self.list_students() if s.username == username), None)

    def add_student(self, student: Student) -> None:
        with self._lock:
            self._students[student.student_id] = student

    def delete_student(self, student_id: str) -> bool:
        with self._lock:
            return self._students.pop(student_id, None) is not None

    def list_teachers(self) -> list[Teacher]:
        with self._lock:
            return list(self._teachers.values())

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return self._teachers.get(teacher_id)

    def get_teacher_by_username(self, username: str) -> Optional[Teacher]:
        return next((t for t in self.list_teachers() if t.username == username), None)

    def add_teacher(self, teacher: Teacher) -> None:
        with self._lock:
            self._teachers[teacher.teacher_id] = teacher

    def delete_teacher(self, teacher_id: str) -> bool:
        with self._lock:
            return self._teachers.pop(teacher_id, None) is not None

    def list_classrooms(self) -> list[Classroom]:
        with self._lock:
            return list(self._classrooms.values())

    def add_classroom(self, classroom: Classroom) -> None:
        with self._lock:
            self._classrooms[classroom.classroom_id] = classroom

    def delete_classroom(self, classroom_id: str) -> bool:
        with self._lock:
            return self._classrooms.pop(classroom_id, None) is not None

    def list_courses(self) -> list[Course]:
        with self._lock:
            return list(self._courses.values())

    def add_course(self, course: Course) -> None:
        with self._lock:
            self._courses[course.course_id] = course

    def next_id(self, prefix: str) -> str:
        pools = {"s": self._students, "t": self._teachers, "r": self._classrooms, "c": self._courses}
        taken = pools[prefix]
        n = len(taken) + 1
        while f"{prefix}{n}" in taken:
            n += 1
        return f"{prefix}{n}"
