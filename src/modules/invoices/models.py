"""Invoice model.

Business rules implemented:
- One invoice per order (``OneToOneField`` = DB unique constraint).
- ``total_amount`` is a snapshot of ``price * quantity`` taken at issue
  time; later price changes never alter it.
- Invoices are immutable once issued.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel

# Wide enough for the largest price (12 digits) times the largest stock
# (PositiveIntegerField, 10 digits).
AMOUNT_MAX_DIGITS = 24
MAX_TOTAL_AMOUNT = Decimal(10) ** (AMOUNT_MAX_DIGITS - 2) - Decimal("0.01")


class Invoice(BaseModel):
    """Billing record issued for exactly one order."""

    order = models.OneToOneField(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="invoice",
    )
    total_amount = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    invoice_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "invoices"
        ordering = ["-invoice_date", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_amount__gte=0),
                name="invoices_total_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"Invoice #{self.pk} for order #{self.order_id}"
