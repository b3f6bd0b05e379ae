from __future__ import annotations

from functools import wraps
from typing import Any, Iterable

from flask import jsonify, request

from ..app_logger import get_logger
from ..core.exceptions import NotFoundError, RecordWriteError, StoreError, ValidationError
from ..database.result import Notification
from .serialization import to_json

logger = get_logger(__name__)


def envelope(data: Any = None, notifications: Iterable[Notification] = (), status: int = 200):
    body = {"data": to_json(data), "notifications": [n.to_dict() for n in notifications]}
    return jsonify(body), status


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def json_api(view):
    """Map service exceptions onto the JSON envelope and a status code."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return envelope(None, [Notification.error(str(e))], 400)
        except NotFoundError as e:
            return envelope(None, [Notification.error(str(e))], 404)
        except RecordWriteError as e:
            logger.error("%s %s failed: %s", request.method, request.path, e)
            return envelope(None, e.notifications or [Notification.error(str(e))], 502)
        except StoreError as e:
            logger.error("%s %s failed: %s", request.method, request.path, e)
            return envelope(None, [Notification.error("Record store unavailable")], 502)

    return wrapper


def list_response(view):
    """Lists always answer 200; a failed load shows up as an empty list plus notifications."""
    data = {"items": view.items, "total": view.total, "options": view.options}
    return envelope(data, view.notifications)


def delete_response(result):
    return envelope(result.data, result.notifications, 200 if result.ok else 502)
