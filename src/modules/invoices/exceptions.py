"""Invoice domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, NotFound, ValidationError


class InvoiceNotFound(NotFound):
    default_message = "Invoice not found."


class InvoiceAlreadyExists(Conflict):
    """An invoice was already issued for the order."""

    code = "invoice_already_exists"
    default_message = "Invoice already generated for this order."


class InvoiceTotalOutOfRange(ValidationError):
    """price x quantity does not fit in an invoice amount."""

    code = "invoice_total_out_of_range"
    default_message = "Invoice total exceeds the maximum supported amount."
