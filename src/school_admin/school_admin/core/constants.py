"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CLASSROOM_CAPACITY = 30
MIN_PASSWORD_LENGTH = 4

SEED_STUDENTS = (
    ("s1", "Student 1"),
    ("s2", "Student 2"),
    ("s3", "Student 3"),
)
SEED_COURSES = (
    ("c1", "Mathematics"),
    ("c2", "Physics"),
    ("c3", "Chemistry"),
)
