"""Stock concurrency integration test.

Proves that the compare-and-decrement in
``ProductDjangoRepository.reserve_stock`` never oversells when order
placements race.

Scenario:
- Product "Gamer PC" with **stock = 5**.
- 10 threads attempt to buy 1 unit each simultaneously.
- Exactly 5 succeed, 5 raise ``InsufficientStock``.
- Final stock is 0 (never negative).

Uses ``TransactionTestCase`` so each thread can see committed data.  SQLite
serialises writers on a file lock (and the in-memory test database is not
shared across threads), so the test only runs against a server database.
"""

from __future__ import annotations

import logging
import unittest
from concurrent.futures import ThreadPoolExecutor, as_completed
from decimal import Decimal

import django
from django.db import connection
from django.test import TransactionTestCase

from modules.orders.dtos import CreateOrderDTO
from modules.orders.exceptions import InsufficientStock
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository

logger = logging.getLogger(__name__)

INITIAL_STOCK = 5
NUM_WORKERS = 10


@unittest.skipIf(connection.vendor == "sqlite", "needs a multi-connection database")
class TestStockConcurrency(TransactionTestCase):
    """Prove atomic stock reservation under concurrent load."""

    def setUp(self):
        self.product = Product.objects.create(
            name="Gamer PC",
            price=Decimal("2999.99"),
            stock=INITIAL_STOCK,
        )

    def _place_order_in_thread(self, thread_id: int) -> str:
        """Attempt to place an order. Returns 'success' or 'insufficient'."""
        django.db.connections.close_all()

        service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        dto = CreateOrderDTO(
            user_id=f"buyer-{thread_id}",
            product_id=self.product.id,
            quantity=1,
        )
        try:
            service.place_order(dto)
            logger.warning("Thread %d: order created successfully", thread_id)
            return "success"
        except InsufficientStock:
            logger.warning("Thread %d: InsufficientStock (expected)", thread_id)
            return "insufficient"
        finally:
            django.db.connections.close_all()

    def _run_race(self) -> list[str]:
        results = []
        with ThreadPoolExecutor(max_workers=NUM_WORKERS) as pool:
            futures = {
                pool.submit(self._place_order_in_thread, i): i
                for i in range(NUM_WORKERS)
            }
            for future in as_completed(futures):
                results.append(future.result())
        return results

    def test_concurrent_orders_exhaust_stock(self):
        """10 threads buy 1 unit from stock=5: exactly 5 succeed."""
        results = self._run_race()

        self.assertEqual(results.count("success"), INITIAL_STOCK)
        self.assertEqual(results.count("insufficient"), NUM_WORKERS - INITIAL_STOCK)

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 0)
        self.assertEqual(Order.objects.count(), INITIAL_STOCK)

    def test_stock_is_conserved(self):
        results = self._run_race()

        self.product.refresh_from_db()
        self.assertGreaterEqual(self.product.stock, 0)
        self.assertEqual(INITIAL_STOCK, results.count("success") + self.product.stock)
