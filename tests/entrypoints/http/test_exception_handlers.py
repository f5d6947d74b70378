"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from vehicle_sms.domain.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from vehicle_sms.entrypoints.http.exception_handlers import register_exception_handlers


class EchoPayload(BaseModel):
    count: int


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
                {"field": "scroll_top", "message": "Must be >= 0", "code": "INVALID_VALUE"},
                {"field": "client_height", "message": "Must be >= 0", "code": "INVALID_VALUE"},
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Vehicle table")

    @test_app.get("/generic-domain-error")
    def raise_generic_domain_error() -> None:
        raise DomainError("Something odd")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    @test_app.post("/echo")
    def echo(payload: EchoPayload) -> dict:
        return {"count": payload.count}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        """ValidationError returns 422 with structured error."""
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_422(self, client: TestClient) -> None:
        """ValidationError with field errors returns 422 with errors array."""
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()

        assert data["detail"] == "Validation failed"
        assert data["code"] == "VALIDATION_ERROR"
        assert [error["field"] for error in data["errors"]] == ["scroll_top", "client_height"]
        assert data["errors"][0]["code"] == "INVALID_VALUE"


class TestNotFoundErrorHandler:
    """Tests for NotFoundError exception handler."""

    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        """NotFoundError returns 404 with structured error."""
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Vehicle table not found",
            "code": "NOT_FOUND",
        }


class TestUnmappedDomainErrorHandler:
    def test_unmapped_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/generic-domain-error")

        assert response.status_code == 400
        assert response.json() == {"detail": "Something odd", "code": "DOMAIN_ERROR"}


class TestRequestValidationErrorHandler:
    def test_invalid_body_returns_422_with_field_path(self, client: TestClient) -> None:
        response = client.post("/echo", json={"count": "many"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["detail"] == "Invalid request parameters"
        assert data["errors"][0]["field"] == "count"


class TestUnexpectedErrorHandler:
    """Tests for unexpected exception handler."""

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        """Unexpected errors return 500 with generic message."""
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
