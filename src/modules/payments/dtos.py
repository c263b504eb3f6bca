"""Payment DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class ProcessPaymentDTO(BaseModel):
    """Immutable DTO for payment requests.

    Validates:
    - ``payment_method`` is a non-empty string (stripped).
    - ``amount_paid`` is strictly positive.
    """

    model_config = ConfigDict(frozen=True)

    order_id: int
    payment_method: str
    amount_paid: Decimal

    @field_validator("payment_method")
    @classmethod
    def payment_method_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Payment method must not be empty.")
        return v.strip()

    @field_validator("amount_paid")
    @classmethod
    def amount_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Amount paid must be greater than zero.")
        return v
