"""Payment model.

Business rules implemented:
- An order is paid at most once (``OneToOneField`` = DB unique constraint).
- ``amount_paid`` is strictly positive (validator + DB check constraint).
- Payments are immutable once recorded.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.invoices.models import AMOUNT_MAX_DIGITS


class PaymentStatus(models.TextChoices):
    PAID = "paid", "Paid"


class Payment(BaseModel):
    """Settlement recorded against an order's invoice."""

    order = models.OneToOneField(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="payment",
    )
    payment_method = models.CharField(max_length=50)
    amount_paid = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PAID,
    )
    payment_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "payments"
        ordering = ["-payment_date", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount_paid__gt=0),
                name="payments_amount_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"Payment #{self.pk} for order #{self.order_id} ({self.status})"
