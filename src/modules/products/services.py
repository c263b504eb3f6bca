"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Name non-empty, price and stock non-negative (validated by DTO).
- Soft delete via repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import models, transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        product = Product(name=dto.name, price=dto.price, stock=dto.stock)
        return self._repo.save(product)

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product, update_fields=sorted(changes))
        logger.info("product.updated", product_id=id, fields=sorted(changes))
        return product

    def delete_product(self, id: int) -> None:
        """Soft-delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        return self._repo.list(filters)

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
