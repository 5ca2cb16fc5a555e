from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Any

from flask import Flask, jsonify, request
from flask.json.provider import DefaultJSONProvider
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, ValidationError
from ..database.mysql_base import normalize_mysql_time

logger = logging.getLogger(__name__)


def _iso_default(o: Any) -> Any:
    if isinstance(o, (datetime, date, time)):
        return o.isoformat()
    if isinstance(o, timedelta):
        return normalize_mysql_time(o).isoformat()
    return DefaultJSONProvider.default(o)


def json_body() -> dict:
    """Request body as a dict; an absent or unparsable body reads as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


class ISODateJSONProvider(DefaultJSONProvider):
    """JSON provider that writes dates as ISO strings (2025-01-31) instead of HTTP dates."""

    default = staticmethod(_iso_default)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": "Server error"}), 500
