from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import error_response, json_body
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["POST"], endpoint="attendance_record")
    def attendance_record():
        data = json_body()
        try:
            record = container.attendance_ledger.record(
                data.get("course"),
                data.get("date"),
                data.get("presentStudents"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("[attendance_record] failed")
            return error_response("Failed to record attendance", 500)

        return jsonify({"message": "Attendance recorded", "record": record.to_dict()})

    @app.route("/attendance", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        rows = container.attendance_reporter.course_summary()
        return jsonify([r.to_dict() for r in rows])

    @app.route("/student/attendance", methods=["GET"], endpoint="student_attendance")
    def student_attendance():
        # Without studentId the student page shows the course-wide view.
        if "studentId" not in request.args:
            rows = container.attendance_reporter.course_summary()
            return jsonify([r.to_dict() for r in rows])

        try:
            rows = container.attendance_reporter.student_summary(request.args.get("studentId", ""))
        except ValidationError as e:
            return error_response(str(e), 400)
        return jsonify([r.to_dict() for r in rows])
