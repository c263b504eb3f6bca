"""Django ORM implementation of the Payment repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog

from modules.payments.models import Payment, PaymentStatus
from modules.payments.repositories.interfaces import IPaymentRepository

logger = structlog.get_logger(__name__)


class PaymentDjangoRepository(IPaymentRepository):
    """Concrete Payment repository backed by Django ORM."""

    def create(self, data: Dict[str, Any]) -> Payment:
        payment = Payment.objects.create(
            order_id=data["order_id"],
            payment_method=data["payment_method"],
            amount_paid=data["amount_paid"],
            status=PaymentStatus.PAID,
        )
        logger.info("payment.created", payment_id=payment.id, order_id=payment.order_id)
        return payment

    def get_by_order_id(self, order_id: int) -> Optional[Payment]:
        try:
            return Payment.objects.filter(order_id=order_id).first()
        except (TypeError, ValueError):
            return None
