from rest_framework.views import exception_handler as drf_exception_handler, set_rollback
from rest_framework.response import Response
from rest_framework.exceptions import (
    NotAuthenticated,
    PermissionDenied,
    ValidationError,
)
from rest_framework import status
import logging

from .errors import DomainError, Forbidden, Unauthenticated, ValidationFailed

logger = logging.getLogger("eventreg.core")


# ---- Envelope handler -------------------------------------------------


def _first_message(data):
    """
    Dig the first human readable message out of DRF error data.
    Serializer errors are {"field": ["msg", ...]}, others {"detail": "msg"}.
    """
    if isinstance(data, dict):
        if "detail" in data:
            return _first_message(data["detail"])
        for value in data.values():
            return _first_message(value)
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def envelope_exception_handler(exc, context):
    """
    Wrap DRF + Django exceptions into the API envelope:
    {"success": false, "msg": "...", "error": "..."}

    Success responses (2xx) are not touched.
    Only errors come through here.
    """
    if isinstance(exc, NotAuthenticated):
        auth_header = getattr(exc, "auth_header", None)
        exc = Unauthenticated()
        exc.auth_header = auth_header
    elif isinstance(exc, PermissionDenied):
        exc = Forbidden()

    response = drf_exception_handler(exc, context)

    if response is not None:
        body = {
            "success": False,
            "msg": _first_message(response.data),
        }
        if isinstance(exc, DomainError):
            body["error"] = exc.default_code
        elif isinstance(exc, ValidationError):
            body["error"] = ValidationFailed.default_code

        headers = {
            name: response[name]
            for name in ("WWW-Authenticate", "Retry-After")
            if response.has_header(name)
        }
        return Response(body, status=response.status_code, headers=headers)

    # Unhandled exceptions -> 500
    logger.exception("Unhandled API exception", exc_info=exc)
    set_rollback()

    return Response(
        {
            "success": False,
            "msg": "Internal server error",
            "error": str(exc),
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
