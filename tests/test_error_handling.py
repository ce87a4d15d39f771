"""
Tests for error handling and request parameter validation.
Tests custom exceptions, error response formatting and path parameter parsing.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
import json

from estate_api.models.property import PropertyType
from estate_api.services.error_handler import ErrorHandlerService
from estate_api.schemas.property import PropertyCreate
from estate_api.utils.exceptions import (
    ValidationError,
    NotFoundError,
    BadRequestError,
    ConflictError,
    InvalidIdentifierError,
    InvalidFilterError,
    PropertyNotFoundError
)
from estate_api.utils.validators import (
    format_field_errors,
    validate_model,
    parse_positive_int,
    parse_limit,
    parse_enum
)


class TestErrorHandlerService:
    """Test error handler service functionality."""

    def test_format_error_response(self):
        """Test error response formatting."""
        response = ErrorHandlerService.format_error_response(
            error_code="TEST_ERROR",
            message="Test error message",
            errors=[{"field": "test", "message": "Test field error"}],
            request_id="test123"
        )

        assert response["code"] == "TEST_ERROR"
        assert response["message"] == "Test error message"
        assert response["requestId"] == "test123"
        assert response["errors"] == [{"field": "test", "message": "Test field error"}]
        assert response["timestamp"].endswith("Z")

    def test_format_error_response_without_errors(self):
        response = ErrorHandlerService.format_error_response("NOT_FOUND", "Property not found")

        assert "errors" not in response
        assert "requestId" not in response

    def test_handle_api_exception(self):
        """Test API exception handling."""
        response = ErrorHandlerService.handle_api_exception(PropertyNotFoundError(7))

        assert response.status_code == 404
        response_data = json.loads(response.body)
        assert response_data["code"] == "NOT_FOUND"
        assert response_data["message"] == "Property not found with ID: 7"
        assert "errors" not in response_data

    def test_handle_api_validation_exception(self):
        exception = ValidationError(field_errors=[{"field": "title", "message": "Title cannot be empty"}])
        response = ErrorHandlerService.handle_api_exception(exception)

        assert response.status_code == 400
        response_data = json.loads(response.body)
        assert response_data["code"] == "VALIDATION_ERROR"
        assert response_data["message"] == "Validation error"
        assert response_data["errors"] == [{"field": "title", "message": "Title cannot be empty"}]

    def test_handle_validation_error(self):
        """Test request validation error handling."""
        mock_error = Mock()
        mock_error.errors.return_value = [
            {
                "loc": ("body", "title"),
                "msg": "Field required",
                "type": "missing",
                "input": None
            },
            {
                "loc": ("body", "amenities", 1),
                "msg": "Value error, Amenities cannot contain empty entries",
                "type": "value_error",
                "input": " "
            }
        ]

        response = ErrorHandlerService.handle_validation_error(mock_error)

        assert response.status_code == 400
        response_data = json.loads(response.body)
        assert response_data["code"] == "VALIDATION_ERROR"
        assert response_data["errors"] == [
            {"field": "title", "message": "Field required"},
            {"field": "amenities -> 1", "message": "Amenities cannot contain empty entries"},
        ]

    def test_handle_unexpected_error(self):
        """Test unexpected error handling."""
        response = ErrorHandlerService.handle_unexpected_error(Exception("secret internals"))

        assert response.status_code == 500
        response_data = json.loads(response.body)
        assert response_data["code"] == "INTERNAL_SERVER_ERROR"
        assert "secret internals" not in response_data["message"]


class TestExceptions:
    """Test exception status codes and messages."""

    def test_status_codes(self):
        assert ValidationError().status_code == 400
        assert NotFoundError("Property").status_code == 404
        assert BadRequestError("bad").status_code == 400
        assert ConflictError("taken").status_code == 409

    def test_not_found_message(self):
        assert NotFoundError("Property").detail == "Property not found"
        assert NotFoundError("Property", 3).detail == "Property not found with ID: 3"

    def test_invalid_identifier_message(self):
        error = InvalidIdentifierError("property ID", "abc")

        assert error.status_code == 400
        assert error.error_code == "BAD_REQUEST"
        assert error.detail == "Invalid property ID: 'abc'"


class TestValidators:
    """Test validation helpers."""

    @pytest.mark.parametrize("value,expected", [("1", 1), ("42", 42), ("007", 7)])
    def test_parse_positive_int_valid(self, value, expected):
        assert parse_positive_int(value) == expected

    @pytest.mark.parametrize("value", ["0", "-3", "abc", "12abc", "1.5", "", "1e3"])
    def test_parse_positive_int_invalid(self, value):
        with pytest.raises(InvalidIdentifierError):
            parse_positive_int(value, "limit value")

    @pytest.mark.parametrize("value,expected", [("0", 0), ("3", 3), ("12", 12)])
    def test_parse_limit_valid(self, value, expected):
        assert parse_limit(value) == expected

    @pytest.mark.parametrize("value", ["-1", "abc", "2.5", ""])
    def test_parse_limit_invalid(self, value):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_limit(value)
        assert "limit value" in exc_info.value.detail

    def test_parse_enum_valid(self):
        assert parse_enum(PropertyType, "commercial", "property type") == PropertyType.COMMERCIAL

    def test_parse_enum_invalid(self):
        with pytest.raises(InvalidFilterError) as exc_info:
            parse_enum(PropertyType, "houseboat", "property type")

        assert exc_info.value.status_code == 400
        assert "residential, commercial, land, industrial" in exc_info.value.detail

    def test_parse_enum_is_case_sensitive(self):
        with pytest.raises(InvalidFilterError):
            parse_enum(PropertyType, "Land", "property type")

    def test_validate_model_collects_every_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_model(PropertyCreate, {"title": "", "price": -1})

        fields = [error["field"] for error in exc_info.value.field_errors]
        assert "title" in fields
        assert "price" in fields
        assert "featuredImage" in fields

    def test_format_field_errors_strips_request_location(self):
        errors = format_field_errors([
            {"loc": ("path", "property_id"), "msg": "bad"},
            {"loc": (), "msg": "Input should be a valid dictionary"},
        ])

        assert errors == [
            {"field": "property_id", "message": "bad"},
            {"field": "body", "message": "Input should be a valid dictionary"},
        ]


class TestAPIErrorResponses:
    """Test error responses produced by the running application."""

    def test_not_found_carries_request_id(self, client: TestClient):
        response = client.get("/api/properties/999")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == "NOT_FOUND"
        assert data["requestId"] == response.headers["X-Request-ID"]

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_404"

    def test_method_not_allowed(self, client: TestClient):
        response = client.patch("/api/properties/1")

        assert response.status_code == 405
        assert response.json()["code"] == "HTTP_405"

    def test_malformed_json(self, client: TestClient):
        response = client.post(
            "/api/properties",
            content="{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unexpected_error_is_generic(self, app):
        @app.get("/api/explode")
        async def explode():
            raise RuntimeError("database password is hunter2")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/explode")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "INTERNAL_SERVER_ERROR"
        assert "hunter2" not in data["message"]

    def test_repository_failure_returns_500(self, client: TestClient, storage, monkeypatch):
        async def broken_get_all():
            raise RuntimeError("table unavailable")

        monkeypatch.setattr(storage.blog_posts, "get_all", broken_get_all)

        response = client.get("/api/blog-posts")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "INTERNAL_SERVER_ERROR"
        assert data["message"] == "Failed to fetch blog posts"
