"""Invoice service layer (Use Cases).

Business rules enforced:
- At most one invoice per order.  The existence check runs under a row
  lock on the order, and the unique constraint on ``invoices.order_id``
  catches whatever slips past it; both surface as ``InvoiceAlreadyExists``.
- ``total_amount`` = product price x order quantity, frozen at issue time,
  and rejected before insert when it overflows the amount column.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import IntegrityError, models, transaction

from modules.invoices.exceptions import (
    InvoiceAlreadyExists,
    InvoiceNotFound,
    InvoiceTotalOutOfRange,
)
from modules.invoices.models import MAX_TOTAL_AMOUNT
from modules.orders.exceptions import OrderNotFound

if TYPE_CHECKING:
    from modules.invoices.models import Invoice
    from modules.invoices.repositories.interfaces import IInvoiceRepository
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class InvoiceService:
    """Application service for Invoice use-cases."""

    def __init__(
        self,
        invoice_repository: IInvoiceRepository,
        order_repository: IOrderRepository,
    ) -> None:
        self._invoice_repo = invoice_repository
        self._order_repo = order_repository

    def generate_invoice(self, order_id: int) -> Invoice:
        """Issue the invoice for an order.

        Raises:
            OrderNotFound: order does not exist.
            InvoiceAlreadyExists: an invoice was already issued.
            InvoiceTotalOutOfRange: price x quantity overflows the amount column.
        """
        try:
            with transaction.atomic():
                order = self._order_repo.get_for_update(order_id)
                if not order:
                    raise OrderNotFound(f"Order {order_id} not found.")

                if self._invoice_repo.get_by_order_id(order.id):
                    raise InvoiceAlreadyExists()

                # Soft-deleted products still price their existing orders.
                total_amount = order.product.price * order.quantity
                if total_amount > MAX_TOTAL_AMOUNT:
                    logger.warning(
                        "invoice.total_out_of_range",
                        order_id=order_id,
                        total_amount=str(total_amount),
                    )
                    raise InvoiceTotalOutOfRange()
                invoice = self._invoice_repo.create(
                    {"order_id": order.id, "total_amount": total_amount}
                )
        except IntegrityError as exc:
            logger.warning("invoice.duplicate", order_id=order_id, error=str(exc))
            raise InvoiceAlreadyExists() from exc

        logger.info(
            "invoice.generated",
            invoice_id=invoice.id,
            order_id=order_id,
            total_amount=str(total_amount),
        )
        return invoice

    def get_invoice(self, order_id: int) -> Invoice:
        """Raises ``InvoiceNotFound`` when the order has no invoice."""
        invoice = self._invoice_repo.get_by_order_id(order_id)
        if not invoice:
            raise InvoiceNotFound()
        return invoice

    def list_invoices(self) -> "models.QuerySet[Invoice]":
        return self._invoice_repo.list()
