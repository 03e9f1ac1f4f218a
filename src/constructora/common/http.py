from __future__ import annotations

from typing import Any, Iterable

from flask import Response, jsonify, request

from ..core.exceptions import DomainError

BASE_CORS_HEADERS = ("authorization", "x-client-info", "apikey", "content-type")


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def error_response(exc: DomainError):
    return json_error(str(exc), exc.status_code)


def json_body() -> dict[str, Any]:
    """Request JSON object, or {} when the body is missing or not an object."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def apply_cors(response: Response, *, extra_headers: Iterable[str], methods: Iterable[str]) -> Response:
    """Echo the caller's origin (or *) the way the portal functions always did."""
    response.headers["Access-Control-Allow-Origin"] = request.headers.get("Origin") or "*"
    response.headers["Vary"] = "Origin"
    response.headers["Access-Control-Allow-Headers"] = ", ".join([*BASE_CORS_HEADERS, *extra_headers])
    response.headers["Access-Control-Allow-Methods"] = ", ".join(methods)
    response.headers["Access-Control-Max-Age"] = "86400"
    return response


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    first = forwarded.split(",")[0].strip()
    return first or (request.remote_addr or "unknown")
