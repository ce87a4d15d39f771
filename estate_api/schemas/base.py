"""
Shared Pydantic configuration for request and response schemas.
JSON payloads use camelCase keys while Python code uses snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON, ignoring unknown keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


def require_text(value, label: str):
    """Reject null and blank strings, returning the stripped text."""
    if value is None:
        raise ValueError(f"{label} cannot be null")
    if not value.strip():
        raise ValueError(f"{label} cannot be empty")
    return value.strip()


def reject_null(value, label: str):
    """Reject an explicit null for a non-nullable field."""
    if value is None:
        raise ValueError(f"{label} cannot be null")
    return value
