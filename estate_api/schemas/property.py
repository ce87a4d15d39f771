"""
Pydantic schemas for property requests and responses.
Handles property creation, partial updates and validation.
"""

from pydantic import Field, field_validator, ValidationInfo
from typing import Optional, List
from datetime import datetime
from decimal import Decimal, InvalidOperation
from estate_api.models.property import PropertyType, ListingStatus
from estate_api.schemas.base import CamelModel, require_text, reject_null


REQUIRED_TEXT_FIELDS = (
    "title", "description", "location", "address", "city", "state", "featured_image"
)

COORDINATE_BOUNDS = {
    "latitude": Decimal("90"),
    "longitude": Decimal("180"),
}


def validate_coordinate(value: Optional[str], field_name: str) -> Optional[str]:
    """Check that a coordinate string is a decimal within range."""
    if value is None:
        return value
    text = value.strip()
    try:
        number = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"{field_name.capitalize()} must be a decimal number")
    if not number.is_finite():
        raise ValueError(f"{field_name.capitalize()} must be a decimal number")
    bound = COORDINATE_BOUNDS[field_name]
    if not -bound <= number <= bound:
        raise ValueError(f"{field_name.capitalize()} must be between -{bound} and {bound}")
    return text


def clean_amenities(value: Optional[List[str]]) -> Optional[List[str]]:
    """Strip amenity labels, rejecting blank entries."""
    if value is None:
        return value
    cleaned = []
    for amenity in value:
        if not amenity.strip():
            raise ValueError("Amenities cannot contain empty entries")
        cleaned.append(amenity.strip())
    return cleaned


class PropertyCreate(CamelModel):
    """Insertable property fields; `id` and `createdAt` are server-assigned."""

    title: str = Field(..., max_length=255, description="Listing title", examples=["Plot A"])
    description: str = Field(..., description="Detailed listing description")
    price: int = Field(..., ge=0, strict=True, description="Asking price in whole currency units", examples=[1000000])
    price_unit: Optional[str] = Field("₹", description="Currency symbol shown before the price")
    price_suffix: Optional[str] = Field("", description="Suffix shown after the price, e.g. /acre")
    area: int = Field(..., gt=0, strict=True, description="Area in `areaUnit` units", examples=[5])
    area_unit: Optional[str] = Field("sq.ft", description="Area unit", examples=["acres"])
    bedrooms: Optional[int] = Field(None, ge=0, le=50, strict=True, description="Bedrooms, null for land")
    bathrooms: Optional[int] = Field(None, ge=0, le=50, strict=True, description="Bathrooms, null for land")
    location: str = Field(..., max_length=255, description="Display location", examples=["Pune"])
    address: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    latitude: Optional[str] = Field(None, description="Latitude as a decimal string", examples=["18.5204"])
    longitude: Optional[str] = Field(None, description="Longitude as a decimal string", examples=["73.8567"])
    property_type: PropertyType = Field(..., description="Property type", examples=["land"])
    listing_status: ListingStatus = Field(..., description="Listing status", examples=["for_sale"])
    featured_image: str = Field(..., description="Featured image URL")
    is_featured: bool = Field(False, strict=True, description="Whether the listing is promoted on the home page")
    amenities: Optional[List[str]] = Field(None, description="Ordered amenity labels")

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        """Validate and clean required text fields."""
        return require_text(v, info.field_name.replace("_", " ").capitalize())

    @field_validator("latitude", "longitude")
    @classmethod
    def validate_coordinates(cls, v, info: ValidationInfo):
        return validate_coordinate(v, info.field_name)

    @field_validator("amenities")
    @classmethod
    def validate_amenities(cls, v):
        return clean_amenities(v)


class PropertyUpdate(CamelModel):
    """
    Partial property update.

    Every field is optional. Fields left out of the payload are absent and
    keep their stored value; fields present are held to the same rules as on
    create, and only nullable fields accept an explicit null.
    """

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    price: Optional[int] = Field(None, ge=0, strict=True)
    price_unit: Optional[str] = None
    price_suffix: Optional[str] = None
    area: Optional[int] = Field(None, gt=0, strict=True)
    area_unit: Optional[str] = None
    bedrooms: Optional[int] = Field(None, ge=0, le=50, strict=True)
    bathrooms: Optional[int] = Field(None, ge=0, le=50, strict=True)
    location: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    property_type: Optional[PropertyType] = None
    listing_status: Optional[ListingStatus] = None
    featured_image: Optional[str] = None
    is_featured: Optional[bool] = Field(None, strict=True)
    amenities: Optional[List[str]] = None

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        """Validate and clean required text fields when present."""
        return require_text(v, info.field_name.replace("_", " ").capitalize())

    @field_validator("price", "area", "property_type", "listing_status", "is_featured")
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name.replace("_", " ").capitalize())

    @field_validator("latitude", "longitude")
    @classmethod
    def validate_coordinates(cls, v, info: ValidationInfo):
        return validate_coordinate(v, info.field_name)

    @field_validator("amenities")
    @classmethod
    def validate_amenities(cls, v):
        return clean_amenities(v)

    def present_fields(self) -> dict:
        """Fields supplied by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class PropertyResponse(CamelModel):
    """Full property record as returned by the API."""

    id: int
    title: str
    description: str
    price: int
    price_unit: Optional[str] = None
    price_suffix: Optional[str] = None
    area: int
    area_unit: Optional[str] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    location: str
    address: str
    city: str
    state: str
    zip_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    property_type: PropertyType
    listing_status: ListingStatus
    featured_image: str
    is_featured: bool
    amenities: Optional[List[str]] = None
    created_at: datetime
