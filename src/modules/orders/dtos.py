"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: input for order placement.
- ``UpdateOrderStatusDTO``: input for the status update endpoint.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.constants import OrderStatus


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order placement.

    ``user_id`` is the resolved caller identity; ``None`` means the
    authentication collaborator could not resolve one.
    """

    model_config = ConfigDict(frozen=True)

    user_id: Optional[str]
    product_id: int
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class UpdateOrderStatusDTO(BaseModel):
    """Immutable DTO for status updates.

    ``status`` only accepts members of ``OrderStatus``; the wire value stays
    the plain lowercase string.
    """

    model_config = ConfigDict(frozen=True)

    order_id: int
    status: str
    caller_id: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_must_be_known(cls, v: str) -> str:
        if v not in OrderStatus.values:
            raise ValueError(
                f"Unknown status '{v}'. Expected one of: {', '.join(OrderStatus.values)}."
            )
        return v
