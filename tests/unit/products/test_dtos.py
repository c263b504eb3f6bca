"""Unit tests for Product DTOs."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_valid(self):
        dto = CreateProductDTO(name=" Widget ", price=Decimal("10.00"), stock=5)
        assert dto.name == "Widget"
        assert dto.price == Decimal("10.00")
        assert dto.stock == 5

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name="  ", price=Decimal("1.00"), stock=1)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            CreateProductDTO(name="Widget", price=Decimal("-0.01"), stock=1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            CreateProductDTO(name="Widget", price=Decimal("1.00"), stock=-1)

    def test_frozen(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("1.00"), stock=1)
        with pytest.raises(ValidationError):
            dto.stock = 10


class TestUpdateProductDTO:
    def test_changes_only_contains_supplied_fields(self):
        dto = UpdateProductDTO(stock=3)
        assert dto.changes() == {"stock": 3}

    def test_empty_update_has_no_changes(self):
        assert UpdateProductDTO().changes() == {}

    def test_validators_apply_to_supplied_fields(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(price=Decimal("-1"))
