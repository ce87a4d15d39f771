"""
Error response schemas for API documentation and consistent error formatting.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any


class FieldError(BaseModel):
    """A single violated field."""

    field: str = Field(..., description="Field name that caused the error", examples=["email"])
    message: str = Field(..., description="Human-readable error message", examples=["value is not a valid email address"])


class ErrorResponse(BaseModel):
    """Body returned for every error response."""

    message: str = Field(..., examples=["Validation error"])
    code: str = Field(..., examples=["VALIDATION_ERROR"])
    timestamp: str = Field(..., examples=["2024-01-01T00:00:00Z"])
    requestId: Optional[str] = Field(None, examples=["abc12345"])
    errors: Optional[List[FieldError]] = Field(None, description="Every violated field, for validation errors")


def _response(description: str) -> Dict[str, Any]:
    return {"description": description, "model": ErrorResponse}


def get_read_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses for endpoints addressing a single record."""
    return {
        400: _response("Bad Request - identifier is not a positive integer"),
        404: _response("Not Found - no record with this identifier"),
        500: _response("Internal Server Error"),
    }


def get_write_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses for endpoints accepting a body."""
    return {
        400: _response("Bad Request - invalid identifier or field-level validation errors"),
        404: _response("Not Found - no record with this identifier"),
        500: _response("Internal Server Error"),
    }


def get_list_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses for list and filter endpoints."""
    return {
        400: _response("Bad Request - invalid filter or limit"),
        500: _response("Internal Server Error"),
    }
