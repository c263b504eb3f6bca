"""Integration tests for standardized error responses.

Every error body carries ``message`` and ``code``; validation errors add a
per-field ``errors`` mapping.
"""

from unittest.mock import MagicMock

import pytest
from django.test import override_settings

from modules.core.exceptions import (
    Conflict,
    InternalError,
    api_exception_handler,
    error_body,
    error_response,
)

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_auth_error_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 401
        assert set(response.json()) == {"message", "code"}

    def test_validation_error_has_field_errors(self, auth_client):
        response = auth_client.post("/api/v1/products/", {"name": ""}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "validation_error"
        assert data["message"] == "Invalid input."
        assert {"name", "price", "stock"} <= set(data["errors"])

    def test_malformed_json_has_standard_format(self, auth_client):
        response = auth_client.post(
            "/api/v1/products/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "parse_error"

    def test_not_found_has_standard_format(self, auth_client):
        response = auth_client.get("/api/v1/products/999999/")
        assert response.status_code == 404
        assert response.json() == {"message": "Product 999999 not found.", "code": "not_found"}

    def test_method_not_allowed_has_standard_format(self, auth_client):
        response = auth_client.delete("/api/v1/orders/")
        assert response.status_code == 405
        assert response.json()["code"] == "method_not_allowed"


class TestDomainErrorRendering:
    def test_error_response_uses_status_and_code(self):
        response = error_response(Conflict("Already there."))
        assert response.status_code == 409
        assert response.data == {"message": "Already there.", "code": "conflict"}

    def test_default_message(self):
        assert error_body(Conflict()) == {
            "message": "The resource is in a conflicting state.",
            "code": "conflict",
        }

    @override_settings(EXPOSE_ERROR_DETAILS=False)
    def test_internal_detail_hidden_by_default(self):
        body = error_body(InternalError(detail="deadlock detected"))
        assert "error" not in body
        assert body["code"] == "internal_error"

    @override_settings(EXPOSE_ERROR_DETAILS=True)
    def test_internal_detail_exposed_when_enabled(self):
        body = error_body(InternalError(detail="deadlock detected"))
        assert body["error"] == "deadlock detected"

    def test_handler_renders_escaped_domain_errors(self):
        response = api_exception_handler(Conflict(), {"view": MagicMock()})
        assert response.status_code == 409

    def test_handler_ignores_unknown_exceptions(self):
        assert api_exception_handler(RuntimeError("boom"), {"view": MagicMock()}) is None
