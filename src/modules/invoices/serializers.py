"""Invoice output serializer."""

from __future__ import annotations

from rest_framework import serializers

from modules.invoices.models import Invoice


class InvoiceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Invoice
        fields = [
            "id",
            "order_id",
            "total_amount",
            "invoice_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
