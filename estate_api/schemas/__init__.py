"""
Pydantic schemas for request/response validation.
"""

from .base import CamelModel

# Property schemas
from .property import (
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse
)

# Blog schemas
from .blog import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogPostResponse
)

# Contact schemas
from .contact import (
    ContactSubmissionCreate,
    ContactSubmissionResponse
)

# User schemas
from .user import (
    UserCreate,
    UserResponse
)

from .error import FieldError, ErrorResponse

__all__ = [
    "CamelModel",

    # Property
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",

    # Blog
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogPostResponse",

    # Contact
    "ContactSubmissionCreate",
    "ContactSubmissionResponse",

    # User
    "UserCreate",
    "UserResponse",

    # Errors
    "FieldError",
    "ErrorResponse"
]
