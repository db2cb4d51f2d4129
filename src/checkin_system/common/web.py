"""Shared helpers for the Flask controller layer."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Mapping

from flask import jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, RequestFailed, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"message": message}), status


def json_body() -> Mapping[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def api_view(view):
    """Map domain errors to JSON responses; state is untouched on failure."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except RequestFailed as e:
            return json_error(str(e), 502)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return json_error("Internal server error.", 500)

    return wrapper


def login_required(api):
    """Gate a view on an existing session of `api` (any role)."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if api.get_session() is None:
                return json_error("Login required.", 401)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(api):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            session = api.get_session()
            if session is None:
                return json_error("Login required.", 401)
            if session.user.role != Role.ADMIN:
                return json_error("Admin access required.", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator
