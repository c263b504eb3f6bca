"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes: the view never swallows generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import error_response
from modules.core.identity import caller_identity
from modules.core.lookups import as_pk
from modules.orders.dtos import CreateOrderDTO, UpdateOrderStatusDTO
from modules.orders.exceptions import (
    InsufficientStock,
    InvalidOrderStatus,
    OrderNotFound,
    ProductNotFound,
    Unauthorized,
)
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderSerializer,
    UpdateOrderStatusSerializer,
)
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    Reads are scoped to the caller's own orders.
    """

    queryset = Order.objects.none()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    ordering_fields = ["created_at", "quantity", "status"]
    ordering = ["-created_at", "-id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def get_throttles(self) -> list[BaseThrottle]:
        """Order placement has its own, tighter throttle scope."""
        self.throttle_scope = "order_creation" if self.action == "create" else None
        return super().get_throttles()

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Order.objects.none()
        user_id = caller_identity(self.request.user)
        if user_id is None:
            return Order.objects.none()
        return self._service.list_orders(user_id)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateOrderDTO(
            user_id=caller_identity(request.user),
            product_id=serializer.validated_data["product_id"],
            quantity=serializer.validated_data["quantity"],
        )

        try:
            order = self._service.place_order(dto)
        except (Unauthorized, ProductNotFound, InsufficientStock) as exc:
            return error_response(exc)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/: the caller's orders, paginated."""
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = OrderSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(
                _order_pk(pk), user_id=caller_identity(request.user)
            )
        except OrderNotFound as exc:
            return error_response(exc)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Status Update
    # ------------------------------------------------------------------

    @action(detail=True, methods=["put"], url_path="status")
    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/status/"""
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = UpdateOrderStatusDTO(
                order_id=_order_pk(pk),
                status=serializer.validated_data["status"],
                caller_id=caller_identity(request.user),
            )
            order = self._service.update_status(dto)
        except (OrderNotFound, InvalidOrderStatus) as exc:
            return error_response(exc)

        return Response(OrderSerializer(order).data)


def _order_pk(value: str | None) -> int:
    pk = as_pk(value)
    if pk is None:
        raise OrderNotFound(f"Order {value} not found.")
    return pk
