"""
Custom exception classes for the land brokerage API.
Provides structured error handling with appropriate HTTP status codes.
"""

from typing import Any, Dict, Optional, List
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class ValidationError(APIException):
    """
    Input failed entity validation.

    Carries one entry per violated field so callers can correct
    everything in a single resubmission.
    """

    def __init__(
        self,
        detail: str = "Validation error",
        field_errors: Optional[List[Dict[str, str]]] = None
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="VALIDATION_ERROR"
        )
        self.field_errors = field_errors or []


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[Any] = None):
        detail = f"{resource} not found"
        if resource_id is not None:
            detail += f" with ID: {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND"
        )


class ConflictError(APIException):
    """Resource conflict exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code="CONFLICT"
        )


class BadRequestError(APIException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="BAD_REQUEST"
        )


class InternalServerError(APIException):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="INTERNAL_SERVER_ERROR"
        )


# Request parameter exceptions
class InvalidIdentifierError(BadRequestError):
    """Path identifier or limit is not a valid integer."""

    def __init__(self, label: str, value: Any):
        super().__init__(f"Invalid {label}: {value!r}")


class InvalidFilterError(BadRequestError):
    """Filter value outside its allowed set."""

    def __init__(self, label: str, value: Any, allowed: List[str]):
        super().__init__(f"Invalid {label} '{value}'. Allowed values: {', '.join(allowed)}")


# Entity specific exceptions
class PropertyNotFoundError(NotFoundError):
    """Property not found exception."""

    def __init__(self, property_id: int):
        super().__init__("Property", property_id)


class BlogPostNotFoundError(NotFoundError):
    """Blog post not found exception."""

    def __init__(self, post_id: int):
        super().__init__("Blog post", post_id)


class ContactSubmissionNotFoundError(NotFoundError):
    """Contact submission not found exception."""

    def __init__(self, submission_id: int):
        super().__init__("Submission", submission_id)


class UserNotFoundError(NotFoundError):
    """User not found exception."""

    def __init__(self, user_id: int):
        super().__init__("User", user_id)


class DuplicateResourceError(ConflictError):
    """Duplicate resource exception."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")
