"""Payment API views.

Routes (mounted under ``/api/v1/``)::

    POST payments/             -> process
    GET  payments/{order_id}/  -> retrieve
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ValidationError, error_response
from modules.core.lookups import as_pk
from modules.invoices.repositories.django_repository import InvoiceDjangoRepository
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.payments.dtos import ProcessPaymentDTO
from modules.payments.exceptions import (
    InsufficientPayment,
    InvoiceNotFound,
    OrderNotFound,
    PaymentAlreadyExists,
    PaymentNotFound,
    PaymentProcessingError,
)
from modules.payments.models import Payment
from modules.payments.repositories.django_repository import PaymentDjangoRepository
from modules.payments.serializers import PaymentSerializer, ProcessPaymentSerializer
from modules.payments.services import PaymentService


class PaymentViewSet(GenericViewSet):
    queryset = Payment.objects.none()
    serializer_class = PaymentSerializer
    lookup_url_kwarg = "order_id"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = PaymentService(
            payment_repository=PaymentDjangoRepository(),
            invoice_repository=InvoiceDjangoRepository(),
            order_repository=OrderDjangoRepository(),
        )

    def get_throttles(self) -> list[BaseThrottle]:
        self.throttle_scope = "payment_processing" if self.action == "process" else None
        return super().get_throttles()

    def process(self, request: Request) -> Response:
        """POST /api/v1/payments/"""
        serializer = ProcessPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = ProcessPaymentDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            errors = exc.errors()
            return error_response(
                ValidationError(errors[0]["msg"] if errors else None)
            )

        try:
            payment, order = self._service.process_payment(dto)
        except (
            OrderNotFound,
            InvoiceNotFound,
            PaymentAlreadyExists,
            InsufficientPayment,
            PaymentProcessingError,
        ) as exc:
            return error_response(exc)

        return Response(
            {
                "message": "Payment successful.",
                "order_id": order.id,
                "status": order.status,
                "payment_details": PaymentSerializer(payment).data,
            }
        )

    def retrieve(self, request: Request, order_id: str | None = None) -> Response:
        """GET /api/v1/payments/{order_id}/"""
        pk = as_pk(order_id)
        try:
            if pk is None:
                raise PaymentNotFound()
            payment = self._service.get_payment(pk)
        except PaymentNotFound as exc:
            return error_response(exc)
        return Response(PaymentSerializer(payment).data)
