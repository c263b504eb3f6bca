"""Payment DRF serializers for API input/output."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.invoices.models import AMOUNT_MAX_DIGITS
from modules.payments.models import Payment


class ProcessPaymentSerializer(serializers.Serializer):
    order_id = serializers.IntegerField(min_value=1)
    payment_method = serializers.CharField(max_length=50)
    amount_paid = serializers.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS, decimal_places=2, min_value=Decimal("0.01")
    )


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = [
            "id",
            "order_id",
            "payment_method",
            "amount_paid",
            "status",
            "payment_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
