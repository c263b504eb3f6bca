"""Payment service layer (Use Cases).

``process_payment`` is one unit of work: the payment row and the order's
move to ``completed`` commit together or not at all.  The order row is
locked for the duration, so two concurrent payments for the same order
serialize and the second one sees the first.

Business rules enforced:
- The order must exist and already have an invoice.
- An order is paid at most once.
- ``amount_paid`` must cover the invoice total; over-payment is recorded
  as-is.
- Unexpected failures inside the unit roll everything back and surface as
  ``PaymentProcessingError`` carrying the diagnostic text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import DomainError
from modules.orders.constants import OrderStatus
from modules.payments.exceptions import (
    InsufficientPayment,
    InvoiceNotFound,
    OrderNotFound,
    PaymentAlreadyExists,
    PaymentNotFound,
    PaymentProcessingError,
)

if TYPE_CHECKING:
    from modules.invoices.repositories.interfaces import IInvoiceRepository
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.payments.dtos import ProcessPaymentDTO
    from modules.payments.models import Payment
    from modules.payments.repositories.interfaces import IPaymentRepository

logger = structlog.get_logger(__name__)


class PaymentService:
    """Application service for Payment use-cases."""

    def __init__(
        self,
        payment_repository: IPaymentRepository,
        invoice_repository: IInvoiceRepository,
        order_repository: IOrderRepository,
    ) -> None:
        self._payment_repo = payment_repository
        self._invoice_repo = invoice_repository
        self._order_repo = order_repository

    def process_payment(self, dto: ProcessPaymentDTO) -> tuple[Payment, Order]:
        """Record the payment and complete the order.

        Returns the payment and the updated order.

        Raises:
            OrderNotFound: order does not exist.
            InvoiceNotFound: no invoice was generated for the order.
            PaymentAlreadyExists: the order was already paid.
            InsufficientPayment: ``amount_paid`` is below the invoice total.
            PaymentProcessingError: storage failure; nothing was written.
        """
        log = logger.bind(order_id=dto.order_id, payment_method=dto.payment_method)

        try:
            with transaction.atomic():
                order = self._order_repo.get_for_update(dto.order_id)
                if not order:
                    raise OrderNotFound(f"Order {dto.order_id} not found.")

                invoice = self._invoice_repo.get_by_order_id(order.id)
                if not invoice:
                    raise InvoiceNotFound()

                if self._payment_repo.get_by_order_id(order.id):
                    raise PaymentAlreadyExists()

                if dto.amount_paid < invoice.total_amount:
                    raise InsufficientPayment(
                        f"Amount paid {dto.amount_paid} is less than the "
                        f"invoice total {invoice.total_amount}."
                    )

                payment = self._payment_repo.create(
                    {
                        "order_id": order.id,
                        "payment_method": dto.payment_method,
                        "amount_paid": dto.amount_paid,
                    }
                )
                order.status = OrderStatus.COMPLETED
                order = self._order_repo.save(order)
        except DomainError as exc:
            log.warning("payment.rejected", code=exc.code, reason=exc.message)
            raise
        except IntegrityError as exc:
            log.warning("payment.duplicate", error=str(exc))
            raise PaymentAlreadyExists() from exc
        except Exception as exc:
            log.error("payment.failed", error=str(exc), exc_info=True)
            raise PaymentProcessingError(detail=str(exc)) from exc

        log.info(
            "payment.processed",
            payment_id=payment.id,
            amount_paid=str(payment.amount_paid),
        )
        return payment, order

    def get_payment(self, order_id: int) -> Payment:
        """Raises ``PaymentNotFound`` when the order has not been paid."""
        payment = self._payment_repo.get_by_order_id(order_id)
        if not payment:
            raise PaymentNotFound()
        return payment
