"""Error taxonomy shared by every module.

Each domain exception carries the HTTP status and the machine-readable
``code`` it maps to, so views can translate it without a lookup table.
Module-specific exceptions (``OrderNotFound``, ``InvoiceAlreadyExists``, ...)
subclass one of the bases below.

Every error body has the same shape::

    {"message": "<human readable>", "code": "<machine code>"}

Validation errors add an ``errors`` object keyed by field.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Base class for business-rule failures raised by services."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "domain_error"
    default_message: str = "The request could not be processed."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Malformed or missing input detected by a service."""

    code = "validation_error"
    default_message = "Invalid input."


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Resource not found."


class Unauthorized(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"
    default_message = "Unauthorized."


class Conflict(DomainError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_message = "The resource is in a conflicting state."


class InsufficientStock(DomainError):
    code = "insufficient_stock"
    default_message = "Insufficient product stock."


class InsufficientPayment(DomainError):
    code = "insufficient_payment"
    default_message = "Amount paid is less than the invoice total."


class InternalError(DomainError):
    """Storage or transaction failure.

    ``detail`` holds the diagnostic text of the underlying failure.  It is
    logged, and only returned to clients when ``EXPOSE_ERROR_DETAILS`` is on.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "internal_error"
    default_message = "An internal error occurred."

    def __init__(self, message: Optional[str] = None, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


# ---------------------------------------------------------------------------
# HTTP translation
# ---------------------------------------------------------------------------


def error_body(exc: DomainError) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": exc.message, "code": exc.code}
    if isinstance(exc, InternalError) and exc.detail:
        if getattr(settings, "EXPOSE_ERROR_DETAILS", False):
            body["error"] = exc.detail
    return body


def error_response(exc: DomainError) -> Response:
    """Build the JSON response for a domain exception."""
    return Response(error_body(exc), status=exc.status_code)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` that normalises every error to ``{message, code}``.

    Domain errors escaping a view are rendered too.  Anything else that is
    not an ``APIException`` returns ``None`` so Django's 500 handling applies.
    """
    if isinstance(exc, DomainError):
        return error_response(exc)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, DRFValidationError):
        response.data = {
            "message": "Invalid input.",
            "code": "validation_error",
            "errors": _as_error_mapping(response.data),
        }
        return response

    # Auth, permission, throttling, parse errors and Http404 all render
    # as ``{"detail": ErrorDetail}``.
    if isinstance(response.data, dict) and "detail" in response.data:
        detail = response.data["detail"]
        response.data = {
            "message": str(detail),
            "code": getattr(detail, "code", None) or "error",
        }
    return response


def _as_error_mapping(data: Any) -> Dict[str, Any]:
    if isinstance(data, dict):
        return data
    return {"non_field_errors": data}
