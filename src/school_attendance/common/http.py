"""Small helpers shared by the Flask controllers."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from flask import current_app, jsonify, request

from ..core.enums import Role

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_unexpected(exc: Exception, action: str):
    """Log an unexpected failure and report it without leaking details outside DEBUG."""
    logger.exception("Unexpected error while %s", action)
    if bool(current_app.config.get("DEBUG", False)):
        return json_error(f"System error while {action}: {exc}", 500)
    return json_error(f"System error while {action}", 500)


def role_from_path(value: str) -> Role:
    # The route converter only admits "students" and "teachers".
    return Role(value)


def request_payload() -> Optional[Mapping]:
    """JSON object body, or the form when no JSON was sent. None for any other JSON value."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    return data if isinstance(data, Mapping) else None
