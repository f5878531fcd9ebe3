"""
Project-wide DRF exception handling.
"""
import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handler so every error body carries ``success: false``
    and a human readable ``message``.
    """
    response = exception_handler(exc, context)

    if response is None:
        # Not an APIException; let Django produce the 500 and log it here.
        request = context.get("request")
        path = request.path if request is not None else "?"
        logger.error(f"Unhandled {exc.__class__.__name__} on {path}: {exc}")
        return None

    data = response.data
    if isinstance(data, dict):
        message = data.get("detail") or data.get("error")
        if message is None:
            message = _first_message(data)
        body = {"success": False, "message": str(message) if message else "Request failed"}
        body.update(data)
    else:
        body = {"success": False, "message": _first_message(data) or "Request failed", "errors": data}

    if response.status_code >= 500:
        logger.error(f"API error {response.status_code}: {body['message']}")

    response.data = body
    return response


def _first_message(data):
    """Dig the first string out of a nested validation error payload."""
    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        for key, value in data.items():
            found = _first_message(value)
            if found:
                return f"{key}: {found}" if key != "non_field_errors" else found
    if isinstance(data, (list, tuple)):
        for value in data:
            found = _first_message(value)
            if found:
                return found
    return None
