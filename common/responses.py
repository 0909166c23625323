"""Standardized JSON and download response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify, send_file

from .errors import AppError
from .io import buffer_from_bytes


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    payload = {"success": True, "data": data}
    response = jsonify(payload)
    response.status_code = status
    return response


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a standardized failure envelope."""

    if isinstance(error, AppError):
        payload = {"success": False, "error": error.to_dict()}
        response = jsonify(payload)
        response.status_code = status or error.status_code
        return response

    payload = {"success": False, "error": dict(error)}
    response = jsonify(payload)
    response.status_code = status or 400
    return response


def attachment(data: bytes, *, filename: str, mimetype: str) -> Response:
    """Send ``data`` as a download that browsers must not cache."""

    return send_file(
        buffer_from_bytes(data),
        mimetype=mimetype,
        as_attachment=True,
        download_name=filename,
        max_age=0,
    )


__all__ = ["ok", "fail", "attachment"]
