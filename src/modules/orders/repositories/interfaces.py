"""Order repository interface.

Extends ``IRepository[Order]`` with the creation and row-locking look-ups
the order pipeline needs.  The Service Layer depends exclusively on this
contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order from ``user_id``, ``product_id``, ``quantity``
        and optionally ``status`` (defaults to ``pending``)."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Order]:
        """Retrieve an order holding a row-level lock until the surrounding
        transaction ends.  Returns ``None`` if it does not exist."""
