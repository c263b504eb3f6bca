from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "deleted_at",
                    models.DateTimeField(blank=True, db_index=True, default=None, null=True),
                ),
                ("name", models.CharField(max_length=255)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("stock", models.PositiveIntegerField(default=0)),
            ],
            options={
                "db_table": "products",
                "ordering": ["name", "id"],
                "abstract": False,
                "indexes": [models.Index(fields=["name"], name="products_name_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(price__gte=0),
                        name="products_price_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(stock__gte=0),
                        name="products_stock_non_negative",
                    ),
                ],
            },
        ),
    ]
