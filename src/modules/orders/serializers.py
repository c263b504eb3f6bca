"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.products.models import MAX_STOCK

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_STOCK)


class UpdateOrderStatusSerializer(serializers.Serializer):
    """Only members of ``OrderStatus`` are accepted."""

    status = serializers.ChoiceField(choices=OrderStatus.choices)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = [
            "id",
            "user_id",
            "product_id",
            "quantity",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
