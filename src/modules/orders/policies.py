"""Status-update policies.

The status update endpoint historically overwrote ``status`` without any
check.  Whether it should be constrained depends on the deployment (e.g.
admin-only behind a gateway), so the rule is a pluggable callable selected
by the ``ORDER_STATUS_POLICY`` setting.

A policy receives the locked order, the requested status and the caller
identity, and raises a domain exception to reject the change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound

if TYPE_CHECKING:
    from modules.orders.models import Order

StatusPolicy = Callable[["Order", str, Optional[str]], None]


def allow_any_transition(order: Order, new_status: str, caller_id: Optional[str]) -> None:
    """Accept every change (the unconstrained default)."""


def forward_only_transition(
    order: Order, new_status: str, caller_id: Optional[str]
) -> None:
    """Only allow the moves listed in ``VALID_TRANSITIONS``."""
    if new_status != order.status and not order.can_transition_to(new_status):
        raise InvalidOrderStatus(
            f"Cannot transition from {order.status} to {new_status}."
        )


def owner_only_transition(
    order: Order, new_status: str, caller_id: Optional[str]
) -> None:
    """Only the owner may change the status; others do not see the order."""
    if caller_id is None or order.user_id != caller_id:
        raise OrderNotFound(f"Order {order.pk} not found.")


def get_status_policy() -> StatusPolicy:
    return import_string(settings.ORDER_STATUS_POLICY)
