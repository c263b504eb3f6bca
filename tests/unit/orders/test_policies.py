"""Unit tests for the pluggable status-update policies."""

from __future__ import annotations

import pytest
from django.test import override_settings

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound
from modules.orders.models import Order
from modules.orders.policies import (
    allow_any_transition,
    forward_only_transition,
    get_status_policy,
    owner_only_transition,
)

pytestmark = pytest.mark.unit


def _order(status: str = OrderStatus.PENDING, user_id: str = "10") -> Order:
    return Order(id=3, user_id=user_id, product_id=1, quantity=1, status=status)


class TestAllowAny:
    @pytest.mark.parametrize("target", OrderStatus.values)
    def test_accepts_everything(self, target):
        allow_any_transition(_order(OrderStatus.COMPLETED), target, None)


class TestForwardOnly:
    @pytest.mark.parametrize(
        "current,target",
        [
            ("pending", "processing"),
            ("pending", "cancelled"),
            ("processing", "completed"),
            ("processing", "cancelled"),
            ("completed", "completed"),
        ],
    )
    def test_allowed(self, current, target):
        forward_only_transition(_order(current), target, None)

    @pytest.mark.parametrize(
        "current,target",
        [
            ("completed", "pending"),
            ("cancelled", "processing"),
            ("processing", "pending"),
            ("pending", "completed"),
        ],
    )
    def test_rejected(self, current, target):
        with pytest.raises(InvalidOrderStatus, match=f"from {current} to {target}"):
            forward_only_transition(_order(current), target, None)


class TestOwnerOnly:
    def test_owner_may_change(self):
        owner_only_transition(_order(user_id="10"), "processing", "10")

    def test_other_caller_sees_not_found(self):
        with pytest.raises(OrderNotFound):
            owner_only_transition(_order(user_id="10"), "processing", "11")

    def test_anonymous_caller_sees_not_found(self):
        with pytest.raises(OrderNotFound):
            owner_only_transition(_order(user_id="10"), "processing", None)


class TestPolicyLookup:
    def test_default_is_allow_any(self):
        assert get_status_policy() is allow_any_transition

    @override_settings(ORDER_STATUS_POLICY="modules.orders.policies.forward_only_transition")
    def test_configured_policy(self):
        assert get_status_policy() is forward_only_transition
