from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import DuplicateEntryError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def json_errors(view):
    """Map domain exceptions raised by a view to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except DuplicateEntryError:
            return error_response("Record already exists", 409)
        except StorageError:
            logger.exception("Storage failure in %s", view.__name__)
            return error_response("Internal server error", 500)
        except Exception:
            logger.exception("Unexpected error in %s", view.__name__)
            return error_response("Internal server error", 500)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
