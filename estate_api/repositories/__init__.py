"""
Repository layer for data access operations.
Provides in-memory tables with the contract a database-backed store would keep.
"""

from estate_api.repositories.base import InMemoryRepository, DeletableRepository, FeaturedRepository
from estate_api.repositories.property import PropertyRepository
from estate_api.repositories.blog import BlogPostRepository
from estate_api.repositories.contact import ContactSubmissionRepository
from estate_api.repositories.user import UserRepository

__all__ = [
    "InMemoryRepository",
    "DeletableRepository",
    "FeaturedRepository",
    "PropertyRepository",
    "BlogPostRepository",
    "ContactSubmissionRepository",
    "UserRepository"
]
