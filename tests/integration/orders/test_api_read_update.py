"""Integration tests for order reads and PUT /api/v1/orders/{id}/status/."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from django.test import override_settings

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.integration


@pytest.fixture()
def order(user, product):
    return Order.objects.create(user_id=str(user.pk), product=product, quantity=2)


def _status_url(order_id) -> str:
    return f"/api/v1/orders/{order_id}/status/"


class TestOrderReads:
    def test_list_only_returns_callers_orders(self, auth_client, other_user, order, product):
        Order.objects.create(user_id=str(other_user.pk), product=product, quantity=1)
        response = auth_client.get("/api/v1/orders/")
        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["results"][0]["id"] == order.id

    def test_list_filters_by_status(self, auth_client, order, user, product):
        Order.objects.create(
            user_id=str(user.pk), product=product, quantity=1, status=OrderStatus.CANCELLED
        )
        response = auth_client.get("/api/v1/orders/", {"status": "cancelled"})
        assert [o["status"] for o in response.data["results"]] == ["cancelled"]

    def test_retrieve_own_order(self, auth_client, order):
        response = auth_client.get(f"/api/v1/orders/{order.id}/")
        assert response.status_code == 200
        assert response.data["id"] == order.id

    def test_retrieve_someone_elses_order_is_404(self, other_client, order):
        response = other_client.get(f"/api/v1/orders/{order.id}/")
        assert response.status_code == 404

    def test_retrieve_non_numeric_id_is_404(self, auth_client):
        response = auth_client.get("/api/v1/orders/abc/")
        assert response.status_code == 404
        assert response.data["code"] == "not_found"


class TestUpdateStatus:
    def test_updates_status(self, auth_client, order):
        response = auth_client.put(_status_url(order.id), {"status": "processing"}, format="json")
        assert response.status_code == 200
        assert response.data["status"] == "processing"
        order.refresh_from_db()
        assert order.status == OrderStatus.PROCESSING

    def test_default_policy_allows_any_move(self, auth_client, order):
        order.status = OrderStatus.COMPLETED
        order.save()
        response = auth_client.put(_status_url(order.id), {"status": "pending"}, format="json")
        assert response.status_code == 200
        assert response.data["status"] == "pending"

    def test_unknown_status_returns_400(self, auth_client, order):
        response = auth_client.put(_status_url(order.id), {"status": "shipped"}, format="json")
        assert response.status_code == 400
        assert "status" in response.data["errors"]
        order.refresh_from_db()
        assert order.status == OrderStatus.PENDING

    def test_missing_order_returns_404(self, auth_client):
        response = auth_client.put(_status_url(424242), {"status": "processing"}, format="json")
        assert response.status_code == 404
        assert response.data["message"] == "Order 424242 not found."

    def test_post_is_not_allowed(self, auth_client, order):
        response = auth_client.post(_status_url(order.id), {"status": "processing"}, format="json")
        assert response.status_code == 405

    @override_settings(ORDER_STATUS_POLICY="modules.orders.policies.forward_only_transition")
    def test_forward_only_policy_rejects_backward_move(self, auth_client, order):
        order.status = OrderStatus.COMPLETED
        order.save()
        response = auth_client.put(_status_url(order.id), {"status": "pending"}, format="json")
        assert response.status_code == 400
        assert response.data["code"] == "invalid_order_status"

    @override_settings(ORDER_STATUS_POLICY="modules.orders.policies.owner_only_transition")
    def test_owner_only_policy_hides_order_from_others(self, other_client, order):
        response = other_client.put(_status_url(order.id), {"status": "cancelled"}, format="json")
        assert response.status_code == 404
        order.refresh_from_db()
        assert order.status == OrderStatus.PENDING

    def test_status_change_is_logged(self, auth_client, order):
        with patch("modules.orders.services.logger") as logger:
            auth_client.put(_status_url(order.id), {"status": "processing"}, format="json")
        logger.info.assert_called_once_with(
            "order.status_updated",
            order_id=order.id,
            old_status="pending",
            new_status="processing",
        )
