"""Unit tests for ProcessPaymentDTO."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.payments.dtos import ProcessPaymentDTO

pytestmark = pytest.mark.unit


def test_valid():
    dto = ProcessPaymentDTO(order_id=1, payment_method=" credit_card ", amount_paid=Decimal("10"))
    assert dto.payment_method == "credit_card"


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5")])
def test_amount_must_be_positive(amount):
    with pytest.raises(ValidationError, match="greater than zero"):
        ProcessPaymentDTO(order_id=1, payment_method="pix", amount_paid=amount)


def test_payment_method_required():
    with pytest.raises(ValidationError, match="Payment method must not be empty"):
        ProcessPaymentDTO(order_id=1, payment_method="  ", amount_paid=Decimal("1"))
