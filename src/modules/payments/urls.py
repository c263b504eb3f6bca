"""Payment URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.payments.views import PaymentViewSet

payment_process = PaymentViewSet.as_view({"post": "process"})
payment_detail = PaymentViewSet.as_view({"get": "retrieve"})

urlpatterns = [
    path("payments/", payment_process, name="payment-process"),
    path("payments/<str:order_id>/", payment_detail, name="payment-detail"),
]
