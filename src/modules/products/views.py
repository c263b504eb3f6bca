"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes: the view never swallows generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ValidationError, error_response
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductInputSerializer, ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    filterset_class = ProductFilter
    ordering_fields = ["name", "price", "stock", "created_at"]
    ordering = ["name", "id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Product.objects.none()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_queryset(self):
        return self._service.list_products()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound as exc:
            return error_response(exc)
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        serializer = ProductInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreateProductDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return error_response(ValidationError(_first_error(exc)))

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/: always a partial update."""
        serializer = ProductInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            dto = UpdateProductDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return error_response(ValidationError(_first_error(exc)))

        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound as exc:
            return error_response(exc)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound as exc:
            return error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


def _first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else "Invalid input."
