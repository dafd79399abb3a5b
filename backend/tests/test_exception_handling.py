import logging

from fastapi.testclient import TestClient

from catalog_api.api.dependencies.handlers import (
    get_create_product_handler,
    get_list_products_handler,
)
from catalog_api.core.exceptions import DomainValidationError


class FailingHandler:
    def __init__(self, error: Exception):
        self.error = error

    def handle(self, *args, **kwargs):
        raise self.error


def test_unexpected_error_returns_generic_500(app, caplog):
    app.dependency_overrides[get_list_products_handler] = lambda: FailingHandler(
        RuntimeError("connection refused to db-host:5432")
    )

    with caplog.at_level(logging.ERROR):
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/products")

    assert response.status_code == 500
    assert response.json() == {"error": "Ocurrió un error interno"}
    assert "db-host" not in response.text
    assert "connection refused" in caplog.text


def test_domain_validation_error_returns_400_with_message(app, client, payload, caplog):
    app.dependency_overrides[get_create_product_handler] = lambda: FailingHandler(
        DomainValidationError("Regla de negocio violada.")
    )

    with caplog.at_level(logging.WARNING):
        response = client.post("/api/products", json=payload())

    assert response.status_code == 400
    assert response.json() == {"error": "Regla de negocio violada."}
    assert "Regla de negocio violada." in caplog.text


def test_invalid_json_returns_400(client):
    response = client.post(
        "/api/products",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
