"""
Store object owning one repository per entity kind.
Its lifetime is owned by the application factory; request handlers reach it
through `app.state`.
"""

from fastapi import Request
from typing import Dict, Optional
import logging

from estate_api.config import Settings
from estate_api.repositories import (
    PropertyRepository,
    BlogPostRepository,
    ContactSubmissionRepository,
    UserRepository
)

logger = logging.getLogger(__name__)


class MemStorage:
    """In-memory store holding the user, property, blog and contact tables."""

    def __init__(self, settings: Optional[Settings] = None):
        featured_properties = settings.featured_properties_limit if settings else 6
        featured_blog_posts = settings.featured_blog_posts_limit if settings else 3

        self.users = UserRepository()
        self.properties = PropertyRepository(default_featured_limit=featured_properties)
        self.blog_posts = BlogPostRepository(default_featured_limit=featured_blog_posts)
        self.contact_submissions = ContactSubmissionRepository()

    async def counts(self) -> Dict[str, int]:
        """Number of records per table."""
        return {
            "users": await self.users.count(),
            "properties": await self.properties.count(),
            "blogPosts": await self.blog_posts.count(),
            "contactSubmissions": await self.contact_submissions.count(),
        }


def get_storage(request: Request) -> MemStorage:
    """
    Get the store attached to the running application.

    Args:
        request: Incoming request

    Returns:
        MemStorage instance created by the application factory
    """
    return request.app.state.storage
