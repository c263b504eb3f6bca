"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products/.
- Search (``q``), filtering, ordering and pagination.
- Domain exception mapping (404, 400).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


@pytest.fixture()
def catalog():
    return [
        Product.objects.create(name="Running Shoes", price=Decimal("300.00"), stock=3),
        Product.objects.create(name="Leather Boots", price=Decimal("900.00"), stock=0),
        Product.objects.create(name="Canvas Shoes", price=Decimal("120.00"), stock=10),
    ]


class TestProductList:
    def test_list_empty(self, auth_client):
        response = auth_client.get("/api/v1/products/")
        assert response.status_code == 200
        assert response.data["results"] == []
        assert response.data["count"] == 0

    def test_list_is_ordered_by_name(self, auth_client, catalog):
        response = auth_client.get("/api/v1/products/")
        names = [p["name"] for p in response.data["results"]]
        assert names == ["Canvas Shoes", "Leather Boots", "Running Shoes"]

    def test_search_by_name(self, auth_client, catalog):
        response = auth_client.get("/api/v1/products/", {"q": "shoes"})
        names = {p["name"] for p in response.data["results"]}
        assert names == {"Running Shoes", "Canvas Shoes"}

    def test_price_range_and_stock_filters(self, auth_client, catalog):
        response = auth_client.get(
            "/api/v1/products/", {"min_price": "100", "max_price": "500", "in_stock": "true"}
        )
        names = [p["name"] for p in response.data["results"]]
        assert names == ["Canvas Shoes", "Running Shoes"]

    def test_ordering_by_price_descending(self, auth_client, catalog):
        response = auth_client.get("/api/v1/products/", {"ordering": "-price"})
        prices = [p["price"] for p in response.data["results"]]
        assert prices == ["900.00", "300.00", "120.00"]

    def test_pagination(self, auth_client, catalog):
        response = auth_client.get("/api/v1/products/", {"page_size": 2})
        assert response.data["count"] == 3
        assert len(response.data["results"]) == 2
        assert response.data["next"] is not None

    def test_soft_deleted_products_hidden(self, auth_client, catalog):
        catalog[0].delete()
        response = auth_client.get("/api/v1/products/")
        assert response.data["count"] == 2


class TestProductCreate:
    def test_create_returns_201(self, auth_client):
        response = auth_client.post(
            "/api/v1/products/",
            {"name": "Premium Shoes", "price": "100000.00", "stock": 5},
            format="json",
        )
        assert response.status_code == 201
        assert response.data["name"] == "Premium Shoes"
        assert response.data["price"] == "100000.00"
        assert response.data["stock"] == 5
        assert Product.objects.filter(id=response.data["id"]).exists()

    def test_negative_stock_returns_400(self, auth_client):
        response = auth_client.post(
            "/api/v1/products/",
            {"name": "Bad", "price": "1.00", "stock": -1},
            format="json",
        )
        assert response.status_code == 400
        assert "stock" in response.data["errors"]

    def test_whitespace_name_returns_400(self, auth_client):
        response = auth_client.post(
            "/api/v1/products/",
            {"name": "   ", "price": "1.00", "stock": 1},
            format="json",
        )
        assert response.status_code == 400


class TestProductRetrieve:
    def test_retrieve(self, auth_client, product):
        response = auth_client.get(f"/api/v1/products/{product.id}/")
        assert response.status_code == 200
        assert response.data["id"] == product.id

    def test_not_found(self, auth_client):
        response = auth_client.get("/api/v1/products/424242/")
        assert response.status_code == 404
        assert response.data["code"] == "not_found"

    def test_soft_deleted_is_not_found(self, auth_client, product):
        product.delete()
        response = auth_client.get(f"/api/v1/products/{product.id}/")
        assert response.status_code == 404


class TestProductUpdate:
    def test_put_is_partial(self, auth_client, product):
        response = auth_client.put(
            f"/api/v1/products/{product.id}/", {"stock": 9}, format="json"
        )
        assert response.status_code == 200
        product.refresh_from_db()
        assert product.stock == 9
        assert product.name == "Premium Shoes"

    def test_patch_price(self, auth_client, product):
        response = auth_client.patch(
            f"/api/v1/products/{product.id}/", {"price": "90000.00"}, format="json"
        )
        assert response.status_code == 200
        assert response.data["price"] == "90000.00"

    def test_update_missing_returns_404(self, auth_client):
        response = auth_client.patch("/api/v1/products/424242/", {"stock": 1}, format="json")
        assert response.status_code == 404


class TestProductDelete:
    def test_delete_returns_204_and_soft_deletes(self, auth_client, product):
        response = auth_client.delete(f"/api/v1/products/{product.id}/")
        assert response.status_code == 204
        product.refresh_from_db()
        assert product.is_deleted

    def test_delete_twice_returns_404(self, auth_client, product):
        auth_client.delete(f"/api/v1/products/{product.id}/")
        response = auth_client.delete(f"/api/v1/products/{product.id}/")
        assert response.status_code == 404
