from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_body
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/generate_timetable", methods=["POST"], endpoint="generate_timetable")
    def generate_timetable():
        try:
            timetable = container.timetable_service.publish(json_body().get("timetableData"))
        except ValidationError as e:
            return error_response(str(e), 400)
        return jsonify({"message": "Timetable generated successfully", "timetable": timetable})

    @app.route("/timetable", methods=["GET"], endpoint="timetable")
    @app.route("/student/timetable", methods=["GET"], endpoint="student_timetable")
    def timetable():
        return jsonify({"timetable": container.timetable_service.current()})
