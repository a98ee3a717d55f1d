from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import domain_error_response, json_body
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/students", methods=["GET"], endpoint="students_list")
    def students_list():
        return jsonify([s.to_dict() for s in roster.list_students()])

    @app.route("/students", methods=["POST"], endpoint="students_add")
    def students_add():
        data = json_body()
        try:
            student = roster.add_student(
                name=data.get("name"),
                student_id=data.get("id"),
                username=data.get("username"),
                password=data.get("password"),
                classroom=data.get("classroom"),
            )
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Student added", "student": student.to_dict()}), 201

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: str):
        try:
            roster.remove_student(student_id)
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Student removed"})

    @app.route("/teachers", methods=["GET"], endpoint="teachers_list")
    def teachers_list():
        return jsonify([t.to_dict() for t in roster.list_teachers()])

    @app.route("/teachers", methods=["POST"], endpoint="teachers_add")
    def teachers_add():
        data = json_body()
        try:
            teacher = roster.add_teacher(
                name=data.get("name"),
                teacher_id=data.get("id"),
                username=data.get("username"),
                password=data.get("password"),
                subject=data.get("subject"),
            )
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Teacher added", "teacher": teacher.to_dict()}), 201

    @app.route("/teachers/<teacher_id>", methods=["DELETE"], endpoint="teachers_delete")
    def teachers_delete(teacher_id: str):
        try:
            roster.remove_teacher(teacher_id)
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Teacher removed"})

    @app.route("/classrooms", methods=["GET"], endpoint="classrooms_list")
    def classrooms_list():
        return jsonify([c.to_dict() for c in roster.list_classrooms()])

    @app.route("/classrooms", methods=["POST"], endpoint="classrooms_add")
    def classrooms_add():
        data = json_body()
        try:
            classroom = roster.add_classroom(name=data.get("name"), capacity=data.get("capacity"))
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Classroom added", "classroom": classroom.to_dict()}), 201

    @app.route("/classrooms/<classroom_id>", methods=["DELETE"], endpoint="classrooms_delete")
    def classrooms_delete(classroom_id: str):
        try:
            roster.remove_classroom(classroom_id)
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Classroom removed"})

    @app.route("/courses", methods=["GET"], endpoint="courses_list")
    def courses_list():
        return jsonify([c.to_dict() for c in roster.list_courses()])

    @app.route("/courses", methods=["POST"], endpoint="courses_add")
    def courses_add():
        try:
            course = roster.add_course(name=json_body().get("name"))
        except DomainError as e:
            return domain_error_response(e)
        return jsonify({"message": "Course added", "course": course.to_dict()}), 201
