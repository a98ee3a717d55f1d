from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import AuthenticationError, DomainError, NotFoundError


def json_body() -> dict:
    """Request JSON as a dict; malformed or missing bodies read as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int = 400):
    return jsonify({"error": message}), status


def domain_error_response(e: DomainError):
    if isinstance(e, AuthenticationError):
        return error_response(str(e), 401)
    if isinstance(e, NotFoundError):
        return error_response(str(e), 404)
    return error_response(str(e), 400)
