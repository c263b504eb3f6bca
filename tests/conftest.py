from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _reset_throttle_counters():
    """Throttle history lives in the process-local cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def user():
    return get_user_model().objects.create_user(username="buyer", password="testpass123")


@pytest.fixture()
def other_user():
    return get_user_model().objects.create_user(username="other", password="testpass123")


@pytest.fixture()
def auth_client(user):
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def other_client(other_user):
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture()
def product():
    """Premium Shoes: price 100000, stock 5."""
    return Product.objects.create(name="Premium Shoes", price=Decimal("100000.00"), stock=5)
