"""Product DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.products.models import MAX_STOCK, Product


class ProductInputSerializer(serializers.Serializer):
    """Validates create (all fields) and update (``partial=True``) payloads."""

    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.00")
    )
    stock = serializers.IntegerField(min_value=0, max_value=MAX_STOCK)


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "stock", "created_at", "updated_at"]
        read_only_fields = fields
