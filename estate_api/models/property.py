"""
Property model for land and building listings.
Holds pricing, area, location and listing status for a single listing.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import List, Optional
import enum


class PropertyType(str, enum.Enum):
    """Property type enumeration."""
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    LAND = "land"
    INDUSTRIAL = "industrial"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class ListingStatus(str, enum.Enum):
    """Commercial state of a listing."""
    FOR_SALE = "for_sale"
    FOR_RENT = "for_rent"
    FOR_LEASE = "for_lease"
    SOLD = "sold"
    RENTED = "rented"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass
class Property:
    """
    Property listing record.

    `id` and `created_at` are assigned by the repository on insert
    and never change afterwards.
    """

    id: int
    title: str
    description: str
    price: int
    area: int
    location: str
    address: str
    city: str
    state: str
    property_type: PropertyType
    listing_status: ListingStatus
    featured_image: str
    created_at: datetime
    price_unit: Optional[str] = "₹"
    price_suffix: Optional[str] = ""
    area_unit: Optional[str] = "sq.ft"
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    zip_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    is_featured: bool = False
    amenities: Optional[List[str]] = field(default=None)

    # Fields the repository assigns; updates never overwrite them
    SERVER_FIELDS = ("id", "created_at")

    @property
    def sort_timestamp(self) -> datetime:
        return self.created_at

    @property
    def has_coordinates(self) -> bool:
        """Whether the listing can be placed on a map."""
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict:
        """Convert property to dictionary."""
        result = asdict(self)
        result["property_type"] = self.property_type.value
        result["listing_status"] = self.listing_status.value
        return result

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title='{self.title}', type='{self.property_type.value}')>"
