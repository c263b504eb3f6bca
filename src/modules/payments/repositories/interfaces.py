"""Payment repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IInsertOnlyRepository

if TYPE_CHECKING:
    from modules.payments.models import Payment


class IPaymentRepository(IInsertOnlyRepository["Payment"]):
    """Repository contract for payments (insert + read only)."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Payment:
        """Insert a ``paid`` payment from ``order_id``, ``payment_method``
        and ``amount_paid``."""

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Optional[Payment]:
        """Return the payment recorded for ``order_id``, or ``None``."""
