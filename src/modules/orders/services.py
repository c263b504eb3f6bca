"""Order service layer (Use Cases).

Orchestrates order placement and status management.  Each write opens
its own ``transaction.atomic()`` block: the service defines the
unit-of-work boundary and every exit path commits or rolls back.

Business rules enforced:
- A resolved caller identity is required to place an order.
- Stock check and decrement are one compare-and-decrement statement
  (``IProductRepository.reserve_stock``), so concurrent placements can
  never oversell.  If order creation fails afterwards the transaction
  rolls the reservation back.
- Status updates go through the configured status policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog
from django.db import models, transaction

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import (
    InsufficientStock,
    OrderNotFound,
    ProductNotFound,
    Unauthorized,
)
from modules.orders.policies import StatusPolicy, get_status_policy

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO, UpdateOrderStatusDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).  ``status_policy``
    defaults to the callable named by ``settings.ORDER_STATUS_POLICY``.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        status_policy: Optional[StatusPolicy] = None,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._status_policy = status_policy

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_order(self, dto: CreateOrderDTO) -> Order:
        """Reserve stock and create a ``pending`` order.

        Raises:
            Unauthorized: no caller identity was resolved.
            ProductNotFound: product does not exist.
            InsufficientStock: product stock is lower than the quantity.
        """
        if not dto.user_id:
            raise Unauthorized("Unauthorized.")

        log = logger.bind(
            user_id=dto.user_id, product_id=dto.product_id, quantity=dto.quantity
        )

        with transaction.atomic():
            product = self._product_repo.get_by_id(dto.product_id)
            if not product:
                raise ProductNotFound(f"Product {dto.product_id} not found.")

            if not self._product_repo.reserve_stock(product.id, dto.quantity):
                log.warning("order.insufficient_stock")
                raise InsufficientStock(
                    f"Insufficient stock for product {product.id}: "
                    f"requested {dto.quantity}."
                )

            order = self._order_repo.create(
                {
                    "user_id": dto.user_id,
                    "product_id": product.id,
                    "quantity": dto.quantity,
                    "status": OrderStatus.PENDING,
                }
            )

        log.info("order.placed", order_id=order.id)
        return order

    def update_status(self, dto: UpdateOrderStatusDTO) -> Order:
        """Overwrite an order's status after the status policy accepts it.

        Raises:
            OrderNotFound: order does not exist (or the policy hides it).
            InvalidOrderStatus: the policy rejected the change.
        """
        policy = self._status_policy or get_status_policy()

        with transaction.atomic():
            order = self._order_repo.get_for_update(dto.order_id)
            if not order:
                raise OrderNotFound(f"Order {dto.order_id} not found.")

            old_status = order.status
            policy(order, dto.status, dto.caller_id)

            order.status = dto.status
            order = self._order_repo.save(order)

        logger.info(
            "order.status_updated",
            order_id=order.id,
            old_status=old_status,
            new_status=order.status,
        )
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int, user_id: Optional[str] = None) -> Order:
        """Retrieve an order, scoped to ``user_id`` when given.

        Raises:
            OrderNotFound: absent, or owned by someone else.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order or (user_id is not None and order.user_id != user_id):
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self, user_id: str) -> "models.QuerySet[Order]":
        """Orders owned by ``user_id``, newest first."""
        return self._order_repo.list({"user_id": user_id})
