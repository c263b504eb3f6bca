"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  Reads eagerly
join the product (``select_related``) because invoice generation and the
API output both need it.

Concurrency control on status updates and payments uses
``select_for_update()`` on the order row.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import models, transaction

from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        order = Order(
            user_id=data["user_id"],
            product_id=data["product_id"],
            quantity=data["quantity"],
            status=data.get("status", OrderStatus.PENDING),
        )
        order.save()
        logger.info(
            "order.created",
            order_id=order.id,
            product_id=order.product_id,
            quantity=order.quantity,
        )
        return order

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with its product.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Order.objects.select_related("product").filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def get_for_update(self, id: int) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE).

        Must run inside ``transaction.atomic()``.  The product is not joined
        so that only the order row is locked.
        """
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> "models.QuerySet[Order]":
        """List orders with optional filters.

        Supported filter keys include ``user_id``, ``status`` and
        ``product_id``.
        """
        queryset = Order.objects.select_related("product")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        entity.save()
        logger.info("order.saved", order_id=entity.id, status=entity.status)
        return entity
