"""
Blog service for publishing and editing articles.
"""

from typing import Optional, List
import logging

from estate_api.storage import MemStorage
from estate_api.models.blog import BlogPost
from estate_api.schemas.blog import BlogPostCreate, BlogPostUpdate
from estate_api.utils.exceptions import BlogPostNotFoundError, InternalServerError

logger = logging.getLogger(__name__)


class BlogService:
    """Blog post operations on top of the blog repository."""

    def __init__(self, storage: MemStorage):
        self.blog_repo = storage.blog_posts

    async def list_posts(self) -> List[BlogPost]:
        try:
            return await self.blog_repo.get_all()
        except Exception as e:
            logger.error(f"Failed to list blog posts: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch blog posts")

    async def list_posts_by_category(self, category: str) -> List[BlogPost]:
        try:
            return await self.blog_repo.get_by_category(category)
        except Exception as e:
            logger.error(f"Failed to list blog posts in category {category}: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch blog posts by category")

    async def get_featured_posts(self, limit: Optional[int] = None) -> List[BlogPost]:
        try:
            return await self.blog_repo.get_featured(limit)
        except Exception as e:
            logger.error(f"Failed to get featured blog posts: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch featured blog posts")

    async def get_post(self, post_id: int) -> BlogPost:
        """
        Get blog post by ID.

        Raises:
            BlogPostNotFoundError: If the post doesn't exist
        """
        try:
            post = await self.blog_repo.get_by_id(post_id)
        except Exception as e:
            logger.error(f"Failed to get blog post {post_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch blog post")

        if post is None:
            raise BlogPostNotFoundError(post_id)
        return post

    async def create_post(self, post_data: BlogPostCreate) -> BlogPost:
        try:
            post = await self.blog_repo.create(post_data.model_dump())
        except Exception as e:
            logger.error(f"Failed to create blog post: {e}", exc_info=True)
            raise InternalServerError("Failed to create blog post")

        logger.info(f"Blog post published: {post.title} (ID: {post.id})")
        return post

    async def update_post(self, post_id: int, post_data: BlogPostUpdate) -> BlogPost:
        """
        Apply a partial update to a blog post.

        Raises:
            BlogPostNotFoundError: If the post doesn't exist
        """
        changes = post_data.present_fields()
        try:
            post = await self.blog_repo.update(post_id, changes)
        except Exception as e:
            logger.error(f"Failed to update blog post {post_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to update blog post")

        if post is None:
            raise BlogPostNotFoundError(post_id)

        if changes:
            logger.info(f"Blog post updated: {post_id} ({', '.join(sorted(changes))})")
        return post

    async def delete_post(self, post_id: int) -> None:
        try:
            deleted = await self.blog_repo.delete(post_id)
        except Exception as e:
            logger.error(f"Failed to delete blog post {post_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to delete blog post")

        if not deleted:
            raise BlogPostNotFoundError(post_id)
        logger.info(f"Blog post deleted: {post_id}")
