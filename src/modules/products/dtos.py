"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


def _check_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name must not be empty.")
    return v.strip()


def _check_price(v: Decimal) -> Decimal:
    if v < 0:
        raise ValueError("Price cannot be negative.")
    return v


def _check_stock(v: int) -> int:
    if v < 0:
        raise ValueError("Stock cannot be negative.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string (stripped).
    - ``price`` is a non-negative Decimal.
    - ``stock`` is a non-negative integer.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    stock: int

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        return _check_stock(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional: only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    price: Decimal | None = None
    stock: int | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        return v if v is None else _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal | None) -> Decimal | None:
        return v if v is None else _check_price(v)

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: int | None) -> int | None:
        return v if v is None else _check_stock(v)

    def changes(self) -> dict:
        """Fields the client actually supplied."""
        return self.model_dump(exclude_none=True)

