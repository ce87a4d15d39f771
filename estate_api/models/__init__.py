"""
Record models for the land brokerage API.
Includes User, Property, BlogPost and ContactSubmission records.
"""

from estate_api.models.user import User
from estate_api.models.property import Property, PropertyType, ListingStatus
from estate_api.models.blog import BlogPost
from estate_api.models.contact import ContactSubmission

# Export all models for easy importing
__all__ = [
    "User",
    "Property",
    "PropertyType",
    "ListingStatus",
    "BlogPost",
    "ContactSubmission",
]
