"""Order domain constants.

``OrderStatus`` is the closed set of statuses an order may carry.  The wire
value is the lowercase string.  ``VALID_TRANSITIONS`` is only consulted by
the ``forward_only_transition`` policy; payment processing always moves an
order to ``completed``.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PROCESSING = "processing", "Processing"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.COMPLETED, OrderStatus.CANCELLED}
