"""
Pydantic schemas for contact form submissions.
"""

from pydantic import EmailStr, Field, field_validator, ValidationInfo
from typing import Optional
from datetime import datetime
from estate_api.schemas.base import CamelModel, require_text


class ContactSubmissionCreate(CamelModel):
    """
    Contact form payload.

    `submittedAt` and `isRead` are server-assigned; if a client sends them
    they are ignored.
    """

    name: str = Field(..., max_length=255, examples=["Anita Desai"])
    email: EmailStr = Field(..., examples=["anita@realtymail.in"])
    phone: str = Field(..., max_length=30, examples=["+91 98765 43210"])
    interest: Optional[str] = Field(None, max_length=100, description="What the visitor is interested in")
    message: str = Field(..., max_length=5000)

    @field_validator("name", "phone", "message")
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        return require_text(v, info.field_name.capitalize())

    @field_validator("interest")
    @classmethod
    def validate_interest(cls, v):
        """Treat a blank interest as not given."""
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class ContactSubmissionResponse(CamelModel):
    """Stored contact submission."""

    id: int
    name: str
    email: str
    phone: str
    interest: Optional[str] = None
    message: str
    submitted_at: datetime
    is_read: bool
