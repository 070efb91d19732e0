"""
Unit tests for FastAPI application setup.

- build_app() returns a fresh, configured FastAPI instance
- Routers are mounted with the expected prefixes
- OpenAPI schema documents the error responses
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront_catalog.entrypoints.http.app import build_app


def test_build_app_returns_new_fastapi_instance() -> None:
    app1 = build_app()
    app2 = build_app()

    assert isinstance(app1, FastAPI)
    assert app1 is not app2


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Storefront Catalog API"
    assert app.version == "0.1.0"
    assert app.docs_url == "/docs"
    assert app.openapi_url == "/openapi.json"


def test_routes_are_registered_with_prefixes() -> None:
    paths = set(build_app().openapi()["paths"])

    assert "/health" in paths
    assert "/v1/catalogs/{catalog}/items" in paths
    assert "/v1/catalogs/{catalog}/facets" in paths
    assert "/v1/catalogs/{catalog}/items/{item_id}" in paths
    assert "/v1/cart" in paths
    assert "/v1/cart/items" in paths


def test_health_endpoint() -> None:
    response = TestClient(build_app()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_openapi_documents_error_responses() -> None:
    schema = TestClient(build_app()).get("/openapi.json").json()

    browse = schema["paths"]["/v1/catalogs/{catalog}/items"]["get"]
    assert {"404", "422", "503"} <= set(browse["responses"])
    assert "ErrorResponse" in schema["components"]["schemas"]
    assert "ErrorDetail" in schema["components"]["schemas"]
