from __future__ import annotations

from werkzeug.security import generate_password_hash

from ..core.constants import SEED_COURSES, SEED_STUDENTS
from .model import Course, Student, Teacher
from .repository import RosterRepository

DEMO_STUDENT_PASSWORD = "student123"
DEMO_TEACHER_PASSWORD = "teacher123"


def ensure_demo_roster(roster: RosterRepository) -> None:
    """Seed the demo students, teacher and course catalog.

    Safe to call more than once: existing ids are left untouched.
    """

    student_hash = generate_password_hash(DEMO_STUDENT_PASSWORD)
    for sid, name in SEED_STUDENTS:
        if not roster.get_student(sid):
            roster.add_student(Student(student_id=sid, name=name, username=sid, password_hash=student_hash))

    if not roster.get_teacher("t1"):
        roster.add_teacher(
            Teacher(
                teacher_id="t1",
                name="Teacher 1",
                username="teacher1",
                password_hash=generate_password_hash(DEMO_TEACHER_PASSWORD),
                subject="Mathematics",
            )
        )

    known = {c.course_id for c in roster.list_courses()}
    for cid, name in SEED_COURSES:
        if cid not in known:
            roster.add_course(Course(course_id=cid, name=name))
