"""Unit tests for the Product model.

Covers:
- Valid creation and name stripping.
- Price and stock non-negative (application + DB constraint).
- Soft delete lifecycle (inherited from SoftDeleteModel).
- __str__ representation.
- INFO log on product creation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from structlog.testing import capture_logs
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"), stock=3)
        p.refresh_from_db()
        assert p.name == "Widget"
        assert p.price == Decimal("19.99")
        assert p.stock == 3

    def test_stock_defaults_to_zero(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert p.stock == 0

    def test_name_is_stripped_on_save(self):
        p = Product.objects.create(name="  Widget  ", price=Decimal("1.00"))
        p.refresh_from_db()
        assert p.name == "Widget"

    def test_zero_price_is_allowed(self):
        p = Product(name="Freebie", price=Decimal("0.00"), stock=1)
        p.full_clean()


class TestProductValidation:
    def test_negative_price_fails_clean(self):
        p = Product(name="Widget", price=Decimal("-1.00"), stock=1)
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "price" in exc_info.value.message_dict

    def test_blank_name_fails_clean(self):
        p = Product(name="   ", price=Decimal("1.00"), stock=1)
        with pytest.raises(ValidationError):
            p.full_clean()

    def test_negative_price_rejected_by_db(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Widget", price=Decimal("-5.00"), stock=1)

    def test_negative_stock_rejected_by_db(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"), stock=1)
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.filter(pk=p.pk).update(stock=-1)


class TestProductSoftDelete:
    def test_deleted_product_hidden_from_alive(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        p.delete()
        assert not Product.objects.alive().filter(pk=p.pk).exists()
        assert Product.objects.filter(pk=p.pk).exists()


class TestProductMisc:
    def test_str(self):
        p = Product(name="Widget", price=Decimal("1.00"), stock=7)
        assert str(p) == "Widget (7 in stock)"

    def test_creation_is_logged(self):
        with capture_logs() as logs:
            p = Product.objects.create(name="Logged", price=Decimal("1.00"), stock=2)
        created = [e for e in logs if e["event"] == "product.created"]
        assert created
        assert created[0]["product_id"] == p.id
