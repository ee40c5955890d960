"""Centralized HTTP error handling."""
from __future__ import annotations

import json

from flask import current_app, g, jsonify, request
from werkzeug.exceptions import HTTPException


def _is_api_request() -> bool:
    """Return True when the current request targets the API."""
    path = request.path or ""
    return path == "/api" or path.startswith("/api/")


def _error_payload(code: int, message: str) -> dict:
    return {"status": "error", "code": code, "message": message}


def register_error_handlers(app, mask=None):
    """Register global error handlers.

    4xx responses are logged without stack traces, unhandled exceptions with
    them. 5xx details are never returned to the client.
    """

    mask = mask or (lambda data: data)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def handle_client_errors(error):
        code = getattr(error, "code", 400)
        current_app.logger.warning(
            "%s %s (%s)",
            code,
            request.path,
            request.remote_addr,
            extra={"event": "api.http_4xx", "request_id": getattr(g, "request_id", None)},
        )
        if _is_api_request():
            return jsonify(_error_payload(code, error.name)), code
        return error

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return error

        try:
            input_json = request.get_json(silent=True)
        except Exception:
            input_json = None

        log_dict = {
            "method": request.method,
            "path": request.path,
            "ua": request.user_agent.string,
            "status": 500,
        }
        if input_json is not None:
            log_dict["json"] = mask(input_json)

        current_app.logger.exception(
            json.dumps(log_dict, ensure_ascii=False, default=str),
            extra={"event": "api.http_5xx", "request_id": getattr(g, "request_id", None)},
        )
        g.exception_logged = True

        return jsonify(_error_payload(500, "Internal Server Error")), 500
