"""Product model with stock control.

Business rules implemented:
- Price cannot be negative.
- Stock cannot be negative (``PositiveIntegerField`` + DB check constraint),
  which also backstops the conditional decrement used by order placement.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel

# Upper bound of PositiveIntegerField on every supported backend.
MAX_STOCK = 2_147_483_647

logger = structlog.get_logger(__name__)


class Product(SoftDeleteModel):
    """Catalog entry that orders reserve stock from."""

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    stock = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(stock__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": "Name must not be empty."})
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": "Stock cannot be negative."})

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product.created",
                product_id=self.id,
                name=self.name,
                stock=self.stock,
            )

    def __str__(self) -> str:
        return f"{self.name} ({self.stock} in stock)"
