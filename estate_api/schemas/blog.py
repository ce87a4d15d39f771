"""
Pydantic schemas for blog post requests and responses.
"""

from pydantic import Field, field_validator, ValidationInfo
from typing import Optional
from datetime import datetime
from estate_api.schemas.base import CamelModel, require_text, reject_null


BLOG_TEXT_FIELDS = ("title", "content", "summary", "author_name", "category", "featured_image")


class BlogPostCreate(CamelModel):
    """Insertable blog post fields; `publishedDate` is stamped on insert."""

    title: str = Field(..., max_length=255, examples=["Buying Agricultural Land in Maharashtra"])
    content: str = Field(..., description="Article body as HTML markup")
    summary: str = Field(..., description="Short teaser shown on cards")
    author_name: str = Field(..., max_length=255, examples=["Rajiv Sharma"])
    category: str = Field(..., max_length=100, examples=["Investment"])
    featured_image: str = Field(..., description="Featured image URL")
    is_featured: bool = Field(False, strict=True)

    @field_validator(*BLOG_TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        return require_text(v, info.field_name.replace("_", " ").capitalize())


class BlogPostUpdate(CamelModel):
    """Partial blog post update; absent fields keep their stored value."""

    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None
    summary: Optional[str] = None
    author_name: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=100)
    featured_image: Optional[str] = None
    is_featured: Optional[bool] = Field(None, strict=True)

    @field_validator(*BLOG_TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        return require_text(v, info.field_name.replace("_", " ").capitalize())

    @field_validator("is_featured")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v, "Is featured")

    def present_fields(self) -> dict:
        """Fields supplied by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class BlogPostResponse(CamelModel):
    """Full blog post record."""

    id: int
    title: str
    content: str
    summary: str
    author_name: str
    category: str
    featured_image: str
    published_date: datetime
    is_featured: bool
