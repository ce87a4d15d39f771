"""
Service layer for business logic implementation.
Contains services for listings, blog posts, contact submissions, users and error handling.
"""

from .property import PropertyService
from .blog import BlogService
from .contact import ContactService
from .user import UserService
from .error_handler import ErrorHandlerService

__all__ = [
    "PropertyService",
    "BlogService",
    "ContactService",
    "UserService",
    "ErrorHandlerService"
]
