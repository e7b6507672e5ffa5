from __future__ import annotations

from typing import Any

from flask import jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound as RouteNotFound


class ApiError(Exception):
    """Error carrying the HTTP status and the JSON body sent to the client."""

    def __init__(self, status_code: int, data: Any):
        super().__init__(status_code, data)
        self.status_code = status_code
        self.data = data


class NotFound(ApiError):
    def __init__(self, message: str = "Book Not Found"):
        super().__init__(404, {"message": message})


class ValidationFailed(ApiError):
    def __init__(self, errors: list[dict[str, str]]):
        super().__init__(422, {"errors": errors})
        self.errors = errors


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        return jsonify(exc.data), exc.status_code

    @app.errorhandler(RouteNotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unknown_route(exc):
        return jsonify({"message": "Not Found"}), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify({"message": exc.description or exc.name}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        app.logger.exception("Unhandled error while serving request: %s", exc)
        return jsonify({"message": "Server Error"}), 500
