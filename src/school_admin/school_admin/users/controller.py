from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.responses import domain_error_response, error_response, json_body
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user = container.auth_service.authenticate(data.get("username"), data.get("password"), data.get("role"))
        except (ValidationError, AuthenticationError) as e:
            return domain_error_response(e)

        session["user_id"] = user.user_id
        session["name"] = user.name
        session["role"] = user.role.value
        return jsonify({"message": "Login successful", "user": user.to_dict()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/me", methods=["GET"], endpoint="me")
    def me():
        if "user_id" not in session:
            return error_response("Not logged in", 401)
        return jsonify({"id": session["user_id"], "name": session.get("name"), "role": session.get("role")})
