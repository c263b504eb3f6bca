from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.core.exceptions import DomainError
from modules.orders.dtos import CreateOrderDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=10,
            help="Number of pending orders to place for the demo user.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created, buyer_id = self._seed_users()
        products = self._seed_products()
        orders_created = self._seed_orders(buyer_id, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_users(self) -> tuple[int, str]:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        buyer = User.objects.filter(username="user").first()
        if buyer is None:
            buyer = User.objects.create_user("user", password="user123")
            created += 1
        return created, str(buyer.pk)

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Monitor 27\"", Decimal("1299.90")),
            ("Mechanical Keyboard", Decimal("399.90")),
            ("Gaming Mouse", Decimal("249.90")),
            ("Notebook 14\"", Decimal("3999.00")),
            ("Headset", Decimal("299.90")),
            ("Office Desk", Decimal("899.00")),
            ("Ergonomic Chair", Decimal("1499.00")),
            ("Bookshelf", Decimal("699.00")),
            ("A4 Paper", Decimal("29.90")),
            ("Notebook Stand", Decimal("149.90")),
        ]
        for name, price in catalog:
            product = Product.objects.alive().filter(name=name).first()
            if product is None:
                product = Product.objects.create(
                    name=name, price=price, stock=random.randint(10, 200)
                )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_orders(self, buyer_id: str, products: list[Product], count: int) -> int:
        """Place orders through the service so stock is reserved as usual."""
        self.stdout.write("Creating orders...")
        service = OrderService(OrderDjangoRepository(), ProductDjangoRepository())
        orders_created = 0
        for _ in range(count):
            product = random.choice(products)
            dto = CreateOrderDTO(
                user_id=buyer_id,
                product_id=product.id,
                quantity=random.randint(1, 3),
            )
            try:
                service.place_order(dto)
            except DomainError as exc:
                self.stdout.write(self.style.WARNING(f"Skipped order: {exc.message}"))
                continue
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
