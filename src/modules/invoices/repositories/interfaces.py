"""Invoice repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IInsertOnlyRepository, Queryable

if TYPE_CHECKING:
    from modules.invoices.models import Invoice


class IInvoiceRepository(IInsertOnlyRepository["Invoice"]):
    """Repository contract for invoices (insert + read only)."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Invoice:
        """Insert an invoice from ``order_id`` and ``total_amount``.

        Implementations let the storage uniqueness violation propagate as
        ``django.db.IntegrityError``.
        """

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Optional[Invoice]:
        """Return the invoice issued for ``order_id``, or ``None``."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Queryable[Invoice]:
        """List invoices, newest first."""
