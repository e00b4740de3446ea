from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def api_errors(view):
    """Map domain errors of a JSON view onto error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return fail(str(e), 404)
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return fail("Internal server error", 500)

    return wrapper
