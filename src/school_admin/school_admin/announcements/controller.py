from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_body
from ..core.enums import Audience
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/announcements", methods=["POST"], endpoint="announcements_post")
    def announcements_post():
        data = json_body()
        try:
            item = container.announcement_service.post(
                title=data.get("title"),
                message=data.get("message"),
                posted_by=data.get("postedBy"),
                audience=data.get("audience"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        return jsonify({"message": "Announcement posted", "announcement": item.to_dict()})

    @app.route("/announcements", methods=["GET"], endpoint="announcements_list")
    def announcements_list():
        return jsonify([a.to_dict() for a in container.announcement_service.list_all()])

    @app.route("/student/announcements", methods=["GET"], endpoint="student_announcements")
    def student_announcements():
        items = container.announcement_service.list_for(Audience.STUDENTS)
        return jsonify([a.to_dict() for a in items])
