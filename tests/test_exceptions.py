"""Test cases for exception handling system."""

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError

from catalog_api.core.exceptions import (
    AppError,
    BadRequestError,
    ConflictError,
    ErrorResponse,
    InternalServerError,
    InvalidReferenceError,
    NotFoundError,
    ResourceNotFoundError,
    UnprocessableEntityError,
    register_exception_handlers,
)


@pytest.fixture
def app() -> FastAPI:
    """Create test FastAPI application."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def lenient_client(app: FastAPI) -> TestClient:
    """Test client that returns 500 responses instead of re-raising server errors."""
    return TestClient(app, raise_server_exceptions=False)


def raising_route(app: FastAPI, path: str, exc: Exception) -> str:
    @app.get(path)
    async def route():
        raise exc

    return path


# =============================================================================
# ErrorResponse Model
# =============================================================================


def test_error_response_model() -> None:
    error = ErrorResponse(
        error_code="PRODUCT_NOT_FOUND",
        message="Product does not exist",
        detail={"product_id": 7},
        path="/api/products/7",
    )

    assert error.success is False
    assert error.detail == {"product_id": 7}
    assert error.path == "/api/products/7"


def test_error_response_defaults() -> None:
    error = ErrorResponse(error_code="TEST", message="Test")

    assert error.success is False
    assert error.detail is None
    assert error.path is None


def test_error_response_detail_must_be_a_mapping() -> None:
    with pytest.raises(ValidationError):
        ErrorResponse(error_code="TEST", message="Test", detail="not-a-dict")


# =============================================================================
# Status codes and default codes/messages
# =============================================================================


@pytest.mark.parametrize(
    ("exc_class", "expected_status", "default_message"),
    [
        (BadRequestError, status.HTTP_400_BAD_REQUEST, "Bad request"),
        (NotFoundError, status.HTTP_404_NOT_FOUND, "Not found"),
        (ConflictError, status.HTTP_409_CONFLICT, "Conflict"),
        (UnprocessableEntityError, status.HTTP_422_UNPROCESSABLE_ENTITY, "Unprocessable entity"),
        (InternalServerError, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    ],
)
def test_error_class_maps_to_status(
    app: FastAPI, client: TestClient, exc_class: type[AppError], expected_status: int, default_message: str
) -> None:
    path = raising_route(app, f"/raise/{exc_class.__name__}", exc_class())

    response = client.get(path)

    assert response.status_code == expected_status
    data = response.json()
    assert data["success"] is False
    assert data["error_code"] == exc_class.__name__
    assert data["message"] == default_message
    assert data["path"] == path
    assert "detail" not in data


def test_error_with_params(app: FastAPI, client: TestClient) -> None:
    path = raising_route(
        app,
        "/raise/params",
        ConflictError(message="Slug already taken", error_code="SLUG_TAKEN", detail={"slug": "linen-shirt"}),
    )

    data = client.get(path).json()

    assert data["error_code"] == "SLUG_TAKEN"
    assert data["message"] == "Slug already taken"
    assert data["detail"] == {"slug": "linen-shirt"}


def test_error_from_error_response(app: FastAPI, client: TestClient) -> None:
    error = ErrorResponse(error_code="INVALID_SLUG", message="Slug format is invalid", detail={"slug": "A B"})
    path = raising_route(app, "/raise/error-response", BadRequestError(error))

    response = client.get(path)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["error_code"] == "INVALID_SLUG"
    assert data["message"] == "Slug format is invalid"
    assert data["detail"] == {"slug": "A B"}


def test_to_error_response() -> None:
    exc = NotFoundError(message="Product not found", error_code="PRODUCT_NOT_FOUND", detail={"product_id": 789})

    error_response = exc.to_error_response(path="/api/products/789")

    assert isinstance(error_response, ErrorResponse)
    assert error_response.error_code == "PRODUCT_NOT_FOUND"
    assert error_response.detail == {"product_id": 789}
    assert error_response.path == "/api/products/789"


# =============================================================================
# Catalog domain errors
# =============================================================================


def test_resource_not_found_error(app: FastAPI, client: TestClient) -> None:
    path = raising_route(app, "/raise/resource-not-found", ResourceNotFoundError("Seller", 42))

    response = client.get(path)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    data = response.json()
    assert data["error_code"] == "RESOURCE_NOT_FOUND"
    assert data["message"] == "Seller not found with id: 42"
    assert data["detail"] == {"resource": "Seller", "id": 42}


def test_invalid_reference_error(app: FastAPI, client: TestClient) -> None:
    path = raising_route(app, "/raise/invalid-reference", InvalidReferenceError("Option", 7, product_id=3))

    response = client.get(path)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["error_code"] == "INVALID_REFERENCE"
    assert data["message"] == "Option 7 does not belong to product 3"
    assert data["detail"] == {"resource": "Option", "id": 7, "product_id": 3}


def test_domain_errors_keep_their_attributes() -> None:
    not_found = ResourceNotFoundError("Product", 9)
    assert isinstance(not_found, NotFoundError)
    assert not_found.resource == "Product"
    assert not_found.resource_id == 9

    invalid = InvalidReferenceError("OptionGroup", 5, product_id=1)
    assert isinstance(invalid, BadRequestError)
    assert invalid.product_id == 1


# =============================================================================
# Framework and database errors
# =============================================================================


def test_validation_error_handler(app: FastAPI, client: TestClient) -> None:
    class OptionBody(BaseModel):
        name: str
        stock: int

    @app.post("/validate")
    async def route(body: OptionBody):
        return body

    response = client.post("/validate", json={"name": "M", "stock": "many"})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    data = response.json()
    assert data["error_code"] == "ValidationError"
    assert data["message"] == "Request validation failed"
    [error] = data["detail"]["errors"]
    assert error["loc"] == ["body", "stock"]


def test_integrity_error_maps_to_conflict(app: FastAPI, client: TestClient) -> None:
    exc = IntegrityError("INSERT INTO products", {}, Exception("UNIQUE constraint failed: products.slug"))
    path = raising_route(app, "/raise/integrity", exc)

    response = client.get(path)

    assert response.status_code == status.HTTP_409_CONFLICT
    data = response.json()
    assert data["error_code"] == "IntegrityError"
    assert data["message"] == "Database constraint violation"
    assert "products.slug" in data["detail"]["database_error"]


@pytest.mark.parametrize("exc", [ValueError("Unexpected error"), ZeroDivisionError("division by zero")])
def test_unexpected_errors_become_500(app: FastAPI, lenient_client: TestClient, exc: Exception) -> None:
    path = raising_route(app, f"/raise/{type(exc).__name__}", exc)

    response = lenient_client.get(path)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    data = response.json()
    assert data["error_code"] == "InternalServerError"
    assert data["message"] == "An unexpected error occurred"
    assert data["path"] == path
