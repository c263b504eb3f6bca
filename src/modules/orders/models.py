"""Order model.

Business rules implemented:
- Status is a closed set (``OrderStatus``); new orders start ``pending``.
- Quantity is at least 1 (validator + DB check constraint).
- Product FK uses PROTECT so an order never loses the product it reserved.
- ``user_id`` stores the caller identity string of the owner.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import TERMINAL_STATES, VALID_TRANSITIONS, OrderStatus


class Order(BaseModel):
    """A user's request to purchase a quantity of one product."""

    user_id = models.CharField(max_length=255, db_index=True)
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        """Check ``new_status`` against ``VALID_TRANSITIONS``."""
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.quantity is not None and self.quantity < 1:
            raise ValidationError({"quantity": "Quantity must be at least 1."})

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.status})"
