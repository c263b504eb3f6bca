"""Payment domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import (
    Conflict,
    InsufficientPayment,
    InternalError,
    NotFound,
)
from modules.invoices.exceptions import InvoiceNotFound
from modules.orders.exceptions import OrderNotFound

__all__ = [
    "InsufficientPayment",
    "InvoiceNotFound",
    "OrderNotFound",
    "PaymentAlreadyExists",
    "PaymentNotFound",
    "PaymentProcessingError",
]


class PaymentNotFound(NotFound):
    default_message = "Payment not found."


class PaymentAlreadyExists(Conflict):
    """The order has already been paid."""

    code = "payment_already_exists"
    default_message = "Payment already processed for this order."


class PaymentProcessingError(InternalError):
    code = "payment_failed"
    default_message = "Payment processing failed."
