"""
Contact submission model for inquiries sent through the site.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional


@dataclass
class ContactSubmission:
    """
    Inquiry left by a site visitor.

    `is_read` starts False and only ever moves to True through
    the mark-read operation.
    """

    id: int
    name: str
    email: str
    phone: str
    message: str
    submitted_at: datetime
    interest: Optional[str] = None
    is_read: bool = False

    SERVER_FIELDS = ("id", "submitted_at", "is_read")

    @property
    def sort_timestamp(self) -> datetime:
        return self.submitted_at

    def to_dict(self) -> dict:
        """Convert submission to dictionary."""
        return asdict(self)

    def __repr__(self) -> str:
        return f"<ContactSubmission(id={self.id}, email='{self.email}', is_read={self.is_read})>"
