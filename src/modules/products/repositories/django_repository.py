"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions: the Service Layer decides
how to translate a missing entity into an API response.

Soft-deleted rows are invisible to every method.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import structlog
from django.db import models, transaction
from django.db.models import F
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a live product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.alive().filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List live products with optional Django ORM look-ups.

        Examples of valid filters::

            {"name__icontains": "laptop"}
            {"price__lte": "100.00"}
        """
        queryset = Product.objects.alive()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(
        self, entity: Product, update_fields: Optional[Iterable[str]] = None
    ) -> Product:
        """Persist (create or update) a product.

        With ``update_fields`` only those columns are written, so a stale
        in-memory ``stock`` never overwrites a concurrent reservation; the
        entity is then reloaded so callers see the stored row.
        """
        entity.save(update_fields=update_fields)
        if update_fields is not None:
            entity.refresh_from_db()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.soft_deleted", product_id=id)
        return True

    def reserve_stock(self, id: int, quantity: int) -> bool:
        """Compare-and-decrement on the product row.

        Issues ``UPDATE products SET stock = stock - q WHERE id = ? AND
        stock >= q AND deleted_at IS NULL``; the affected-row count tells
        whether the reservation won.  Atomic on every backend, including
        SQLite where ``SELECT FOR UPDATE`` is ignored.
        """
        updated = (
            Product.objects.alive()
            .filter(id=id, stock__gte=quantity)
            .update(stock=F("stock") - quantity, updated_at=timezone.now())
        )
        logger.info(
            "product.stock_reservation",
            product_id=id,
            quantity=quantity,
            reserved=bool(updated),
        )
        return updated == 1
