"""Django ORM implementation of the Invoice repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import models

from modules.invoices.models import Invoice
from modules.invoices.repositories.interfaces import IInvoiceRepository

logger = structlog.get_logger(__name__)


class InvoiceDjangoRepository(IInvoiceRepository):
    """Concrete Invoice repository backed by Django ORM."""

    def create(self, data: Dict[str, Any]) -> Invoice:
        invoice = Invoice.objects.create(
            order_id=data["order_id"],
            total_amount=data["total_amount"],
        )
        logger.info(
            "invoice.created",
            invoice_id=invoice.id,
            order_id=invoice.order_id,
            total_amount=str(invoice.total_amount),
        )
        return invoice

    def get_by_order_id(self, order_id: int) -> Optional[Invoice]:
        try:
            return Invoice.objects.filter(order_id=order_id).first()
        except (TypeError, ValueError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Invoice]":
        queryset = Invoice.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset
