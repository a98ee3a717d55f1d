from __future__ import annotations

from flask import Flask, jsonify, request, send_from_directory

from ..common.datetime_utils import parse_iso_date
from ..common.responses import error_response, json_body
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        # Multipart when a file is attached, JSON otherwise.
        if request.form or request.files:
            return request.form.to_dict()
        return json_body()

    @app.route("/notes", methods=["POST"], endpoint="notes_share")
    def notes_share():
        data = _payload()
        try:
            if not data.get("title") or not data.get("postedBy"):
                raise ValidationError("title and postedBy are required")
            require_non_empty(data.get("title"), "title")
            require_non_empty(data.get("postedBy"), "postedBy")
            attachment = container.upload_storage.save(request.files.get("file"))
            note = container.materials_service.share_note(
                title=data.get("title"),
                description=data.get("description"),
                posted_by=data.get("postedBy"),
                attachment=attachment,
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except OSError:
            app.logger.exception("[notes_share] upload failed")
            return error_response("Failed to store uploaded file", 500)
        return jsonify({"message": "Note shared successfully", "note": note.to_dict()})

    @app.route("/notes", methods=["GET"], endpoint="notes_list")
    @app.route("/student/notes", methods=["GET"], endpoint="student_notes")
    def notes_list():
        return jsonify([n.to_dict() for n in container.materials_service.list_notes()])

    @app.route("/assignments", methods=["POST"], endpoint="assignments_post")
    def assignments_post():
        data = _payload()
        try:
            if not data.get("title") or not data.get("dueDate") or not data.get("postedBy"):
                raise ValidationError("title, dueDate and postedBy are required")
            require_non_empty(data.get("title"), "title")
            require_non_empty(data.get("postedBy"), "postedBy")
            # Validate everything before the upload touches disk.
            due_date = parse_iso_date(data.get("dueDate"), "dueDate")
            attachment = container.upload_storage.save(request.files.get("file"))
            item = container.materials_service.post_assignment(
                title=data.get("title"),
                due_date=due_date,
                posted_by=data.get("postedBy"),
                description=data.get("description"),
                course=data.get("course"),
                attachment=attachment,
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except OSError:
            app.logger.exception("[assignments_post] upload failed")
            return error_response("Failed to store uploaded file", 500)
        return jsonify({"message": "Assignment posted", "assignment": item.to_dict()})

    @app.route("/assignments", methods=["GET"], endpoint="assignments_list")
    @app.route("/student/assignments", methods=["GET"], endpoint="student_assignments")
    def assignments_list():
        return jsonify([a.to_dict() for a in container.materials_service.list_assignments()])

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploads")
    def uploads(filename: str):
        return send_from_directory(container.upload_storage.folder.resolve(), filename)
