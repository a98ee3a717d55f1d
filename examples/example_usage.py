"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; attendance rules live in the ledger and reporter.
"""

from src.school_admin.school_admin.container import build_container


def main():
    container = build_container(upload_folder="uploads", public_base_url="http://localhost:8000")

    ledger = container.attendance_ledger
    ledger.record("Physics", "2024-01-01", ["s1", "s2"])
    ledger.record("Physics", "2024-01-02", ["s1"])

    for row in container.attendance_reporter.course_summary():
        print(row.to_dict())
    for row in container.attendance_reporter.student_summary("s2"):
        print(row.to_dict())


if __name__ == "__main__":
    main()
