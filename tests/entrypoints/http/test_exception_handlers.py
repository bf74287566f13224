"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from parts_catalog.domain.errors import (
    InternalError,
    NotFoundError,
    SchemaMismatchError,
    StorageError,
    TableMissingError,
    ValidationError,
)
from parts_catalog.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    # Add test routes that raise different errors
    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {
                    "field": "product_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                },
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Product", "123")

    @test_app.get("/internal-error")
    def raise_internal_error() -> dict:
        raise InternalError("Unexpected condition")

    @test_app.get("/storage-error")
    def raise_storage_error() -> dict:
        raise StorageError("Failed to search products", operation="search products")

    @test_app.get("/schema-mismatch")
    def raise_schema_mismatch() -> dict:
        raise SchemaMismatchError("Product table is missing an expected column")

    @test_app.get("/table-missing")
    def raise_table_missing() -> dict:
        raise TableMissingError("Product table does not exist")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    @test_app.get("/typed-query")
    def typed_query(page: int = Query()) -> dict:
        return {"page": page}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client for the app."""
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# Client errors
# ==============================================================================


def test_validation_error_returns_422(client: TestClient) -> None:
    response = client.get("/validation-error")

    assert response.status_code == 422
    assert response.json() == {"error": "Validation failed", "code": "VALIDATION_ERROR"}


def test_validation_error_with_fields_includes_errors(client: TestClient) -> None:
    response = client.get("/validation-error-with-fields")

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"] == [
        {
            "field": "product_id",
            "message": "Must be a valid UUID format",
            "code": "INVALID_UUID",
        }
    ]


def test_not_found_error_returns_404(client: TestClient) -> None:
    response = client.get("/not-found-error")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Product with identifier '123' not found",
        "code": "NOT_FOUND",
    }


def test_request_validation_error_uses_structured_body(client: TestClient) -> None:
    response = client.get("/typed-query", params={"page": "abc"})

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "Invalid request parameters"
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "page"


# ==============================================================================
# Server errors
# ==============================================================================


@pytest.mark.parametrize(
    ("path", "code", "message"),
    [
        ("/internal-error", "INTERNAL_ERROR", "Unexpected condition"),
        ("/storage-error", "STORAGE_ERROR", "Failed to search products"),
        ("/schema-mismatch", "SCHEMA_MISMATCH", "Product table is missing an expected column"),
        ("/table-missing", "TABLE_MISSING", "Product table does not exist"),
    ],
)
def test_server_side_domain_errors_return_500_with_code(
    client: TestClient, path: str, code: str, message: str
) -> None:
    response = client.get(path)

    assert response.status_code == 500
    assert response.json() == {"error": message, "code": code}


def test_storage_error_context_is_not_leaked(client: TestClient) -> None:
    response = client.get("/storage-error")

    assert "operation" not in response.json()


def test_unexpected_error_returns_generic_500(client: TestClient) -> None:
    response = client.get("/unexpected-error")

    assert response.status_code == 500
    assert response.json() == {
        "error": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }
    assert "Something went wrong" not in response.text
