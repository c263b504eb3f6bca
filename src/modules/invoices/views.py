"""Invoice API views.

Routes (mounted under ``/api/v1/``)::

    GET  invoices/             -> list
    GET  invoices/{order_id}/  -> retrieve
    POST invoices/{order_id}/  -> generate
"""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import error_response
from modules.core.lookups import as_pk
from modules.invoices.exceptions import (
    InvoiceAlreadyExists,
    InvoiceNotFound,
    InvoiceTotalOutOfRange,
)
from modules.invoices.models import Invoice
from modules.invoices.repositories.django_repository import InvoiceDjangoRepository
from modules.invoices.serializers import InvoiceSerializer
from modules.invoices.services import InvoiceService
from modules.orders.exceptions import OrderNotFound
from modules.orders.repositories.django_repository import OrderDjangoRepository


class InvoiceViewSet(GenericViewSet):
    """Invoices are addressed by the order they were issued for."""

    queryset = Invoice.objects.none()
    serializer_class = InvoiceSerializer
    lookup_url_kwarg = "order_id"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = InvoiceService(
            invoice_repository=InvoiceDjangoRepository(),
            order_repository=OrderDjangoRepository(),
        )

    def get_queryset(self):
        return self._service.list_invoices()

    def list(self, request: Request) -> Response:
        page = self.paginate_queryset(self.get_queryset())
        return self.get_paginated_response(InvoiceSerializer(page, many=True).data)

    def retrieve(self, request: Request, order_id: str | None = None) -> Response:
        pk = as_pk(order_id)
        try:
            if pk is None:
                raise InvoiceNotFound()
            invoice = self._service.get_invoice(pk)
        except InvoiceNotFound as exc:
            return error_response(exc)
        return Response(InvoiceSerializer(invoice).data)

    def generate(self, request: Request, order_id: str | None = None) -> Response:
        """POST /api/v1/invoices/{order_id}/"""
        pk = as_pk(order_id)
        try:
            if pk is None:
                raise OrderNotFound(f"Order {order_id} not found.")
            invoice = self._service.generate_invoice(pk)
        except (OrderNotFound, InvoiceAlreadyExists, InvoiceTotalOutOfRange) as exc:
            return error_response(exc)
        return Response(InvoiceSerializer(invoice).data)
