"""Error taxonomy for the HostelGo API and the handler that renders it.

Every failure leaves the API as ``{"error": <message>, "details": <optional>}``.
Services raise the exceptions below; DRF routes them through
:func:`api_exception_handler`, which also reshapes DRF's own errors
(serializer validation, authentication, permission, 404) and storage
failures into the same envelope.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class HostelGoError(exceptions.APIException):
    """Base class for domain errors raised by services."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Something went wrong"
    default_code = "error"

    def __init__(self, detail: str | None = None, *, details: Any = None, extra: dict[str, Any] | None = None):
        super().__init__(detail=detail or self.default_detail)
        self.details = details
        self.extra = extra or {}


class ValidationError(HostelGoError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
    default_code = "invalid"


class AuthenticationError(HostelGoError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "authentication_failed"


class AuthorizationError(HostelGoError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"
    default_code = "permission_denied"


class NotFoundError(HostelGoError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class StorageError(HostelGoError):
    default_detail = "Database error"
    default_code = "storage_error"


def _first_message(detail: Any) -> str:
    """Return a single human-readable line from a DRF error detail."""

    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ("non_field_errors", "detail") or field.lower() in message.lower():
                return message
            return f"{field}: {message}"
        return "Invalid request"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request"
    return str(detail)


def _error_body(message: str, details: Any = None, extra: dict[str, Any] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    if extra:
        body.update(extra)
    return body


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    # rest_framework.views loads DEFAULT_AUTHENTICATION_CLASSES, which imports this module.
    from rest_framework.views import exception_handler

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, DatabaseError):
        logger.exception("Storage failure in %s", view_name)
        return Response(
            _error_body(StorageError.default_detail, str(exc)),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, HostelGoError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log("%s rejected in %s: %s", exc.__class__.__name__, view_name, exc.detail)
        return Response(_error_body(str(exc.detail), exc.details, exc.extra), status=exc.status_code)

    if isinstance(exc, exceptions.NotAuthenticated):
        logger.warning("Unauthenticated request to %s", view_name)
        response = Response(
            _error_body(
                "Authentication required",
                "Email and password required for authentication",
                {
                    "hint": (
                        "Provide credentials via headers (X-User-Email, X-User-Password), "
                        "query params, or request body"
                    )
                },
            ),
            status=status.HTTP_401_UNAUTHORIZED,
        )
        return response

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, Http404):
        message = "Not found"
    elif isinstance(exc, exceptions.ValidationError):
        response.data = _error_body(_first_message(exc.detail), exc.detail)
        logger.warning("Validation failed in %s: %s", view_name, response.data["error"])
        return response
    else:
        message = _first_message(response.data)

    logger.warning("Request to %s failed with %s: %s", view_name, response.status_code, message)
    response.data = _error_body(message)
    return response
