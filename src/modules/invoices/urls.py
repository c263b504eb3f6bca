"""Invoice URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.invoices.views import InvoiceViewSet

invoice_list = InvoiceViewSet.as_view({"get": "list"})
invoice_detail = InvoiceViewSet.as_view({"get": "retrieve", "post": "generate"})

urlpatterns = [
    path("invoices/", invoice_list, name="invoice-list"),
    path("invoices/<str:order_id>/", invoice_detail, name="invoice-detail"),
]
