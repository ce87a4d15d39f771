"""
Blog post model for published articles.
"""

from dataclasses import dataclass, asdict
from datetime import datetime


@dataclass
class BlogPost:
    """Published article shown in the blog section."""

    id: int
    title: str
    content: str
    summary: str
    author_name: str
    category: str
    featured_image: str
    published_date: datetime
    is_featured: bool = False

    SERVER_FIELDS = ("id", "published_date")

    @property
    def sort_timestamp(self) -> datetime:
        return self.published_date

    def to_dict(self) -> dict:
        """Convert blog post to dictionary."""
        return asdict(self)

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, title='{self.title}', category='{self.category}')>"
