"""
Unit tests for FastAPI application setup and configuration.

- build_app() creates a properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (index, health, products under API_BASE_URL)
- Error envelope for unknown routes
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_catalog.entrypoints.http.app import build_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(build_app(), raise_server_exceptions=False)


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Product Catalog API"
    assert app.version == "1.0.0"
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_routes_registered_under_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("API_BASE_URL", raising=False)
    paths = build_app().openapi()["paths"]

    assert "/" in paths
    assert "/health" in paths
    assert "/api/products" in paths
    assert "/api/products/bulk" in paths
    assert "/api/products/stats" in paths
    assert "/api/products/search/price" in paths
    assert "/api/products/search/rating" in paths
    assert "/api/products/search/specs" in paths
    assert "/api/products/{product_id}" in paths


def test_custom_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "/v1")

    client = TestClient(build_app(), raise_server_exceptions=False)

    assert client.get("/v1/products/1").status_code == 200
    assert client.get("/api/products/1").status_code == 404


def test_openapi_schema_lists_product_routes(client: TestClient) -> None:
    response = client.get("/openapi.json")

    assert response.status_code == 200
    assert "/api/products/search/price" in response.json()["paths"]


def test_docs_available(client: TestClient) -> None:
    assert client.get("/docs").status_code == 200


# ==============================================================================
# End-to-end smoke
# ==============================================================================


def test_health_and_index(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["message"] == "Welcome to the Product Catalog API"


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {
        "error": {"message": "Route not found: GET /api/unknown", "code": "ROUTE_NOT_FOUND"}
    }


def test_request_logging_in_development(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("APP_ENV", "development")
    client = TestClient(build_app(), raise_server_exceptions=False)

    with caplog.at_level("INFO", logger="product_catalog.entrypoints.http.app"):
        client.get("/health")

    assert "GET /health" in caplog.text
