"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import (
    InsufficientStock,
    NotFound,
    Unauthorized,
    ValidationError,
)
from modules.products.exceptions import ProductNotFound

__all__ = [
    "InsufficientStock",
    "InvalidOrderStatus",
    "OrderNotFound",
    "ProductNotFound",
    "Unauthorized",
]


class OrderNotFound(NotFound):
    """The requested order does not exist (or is not visible to the caller)."""

    default_message = "Order not found."


class InvalidOrderStatus(ValidationError):
    """The status policy rejected the requested status change."""

    code = "invalid_order_status"
    default_message = "Invalid order status."
