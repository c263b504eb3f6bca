"""Product repository interface.

Extends ``IRepository[Product]`` with deletion and the atomic stock
reservation that order placement depends on.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def save(
        self, entity: Product, update_fields: Optional[Iterable[str]] = None
    ) -> Product:
        """Persist a product; restrict the UPDATE to ``update_fields`` when given."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Soft-delete a product. Returns ``False`` when it does not exist."""

    @abstractmethod
    def reserve_stock(self, id: int, quantity: int) -> bool:
        """Atomically decrement stock by ``quantity`` if enough is available.

        Must be a single compare-and-decrement at the storage layer so
        concurrent reservations can never oversell.  Returns ``False`` when
        the product is missing or holds less than ``quantity``.
        """
