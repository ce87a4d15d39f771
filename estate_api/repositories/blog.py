"""
Blog post repository.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, Callable

from estate_api.repositories.base import FeaturedRepository
from estate_api.models.blog import BlogPost


class BlogPostRepository(FeaturedRepository[BlogPost]):
    """Repository for blog posts, newest published first when featured."""

    def __init__(self, default_featured_limit: int = 3, clock: Optional[Callable[[], datetime]] = None):
        super().__init__(BlogPost, default_featured_limit, clock)

    def _server_values(self) -> Dict[str, Any]:
        return {"published_date": self.clock()}

    async def get_by_category(self, category: str) -> List[BlogPost]:
        """Get posts whose category matches exactly, case included."""
        return await self.filter_by(lambda post: post.category == category)
