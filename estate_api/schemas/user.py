"""
Pydantic schemas for administrator accounts.
"""

from pydantic import Field, field_validator
from estate_api.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Insertable user fields."""

    username: str = Field(..., min_length=3, max_length=50, examples=["admin"])
    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Usernames are compared exactly, so only surrounding whitespace is removed."""
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters")
        if any(ch.isspace() for ch in v):
            raise ValueError("Username cannot contain whitespace")
        return v


class UserResponse(CamelModel):
    """Public view of a user; the password hash is never exposed."""

    id: int
    username: str
