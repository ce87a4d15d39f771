"""
Utility modules for the land brokerage API.
"""

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    ConflictError,
    BadRequestError,
    InternalServerError,
    InvalidIdentifierError,
    InvalidFilterError,
    PropertyNotFoundError,
    BlogPostNotFoundError,
    ContactSubmissionNotFoundError,
    UserNotFoundError,
    DuplicateResourceError
)

from .validators import (
    format_field_errors,
    validate_model,
    parse_positive_int,
    parse_limit,
    parse_enum
)

__all__ = [
    # Exceptions
    "APIException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "BadRequestError",
    "InternalServerError",
    "InvalidIdentifierError",
    "InvalidFilterError",
    "PropertyNotFoundError",
    "BlogPostNotFoundError",
    "ContactSubmissionNotFoundError",
    "UserNotFoundError",
    "DuplicateResourceError",

    # Validators
    "format_field_errors",
    "validate_model",
    "parse_positive_int",
    "parse_limit",
    "parse_enum"
]
