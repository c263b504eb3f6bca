"""Unit tests for Product serializers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductInputSerializer, ProductSerializer

pytestmark = pytest.mark.unit


class TestProductInputSerializer:
    def test_valid_payload(self):
        s = ProductInputSerializer(data={"name": "Widget", "price": "10.50", "stock": 4})
        assert s.is_valid(), s.errors
        assert s.validated_data["price"] == Decimal("10.50")

    def test_missing_fields_rejected_on_create(self):
        s = ProductInputSerializer(data={"name": "Widget"})
        assert not s.is_valid()
        assert set(s.errors) == {"price", "stock"}

    def test_partial_allows_missing_fields(self):
        s = ProductInputSerializer(data={"stock": 0}, partial=True)
        assert s.is_valid(), s.errors
        assert s.validated_data == {"stock": 0}

    def test_negative_values_rejected(self):
        s = ProductInputSerializer(data={"name": "W", "price": "-1", "stock": -1})
        assert not s.is_valid()
        assert "price" in s.errors
        assert "stock" in s.errors


class TestProductSerializer:
    def test_output_fields(self):
        p = Product.objects.create(name="Widget", price=Decimal("10.00"), stock=2)
        data = ProductSerializer(p).data
        assert set(data) == {"id", "name", "price", "stock", "created_at", "updated_at"}
        assert data["price"] == "10.00"
