"""
Property repository with listing queries.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, Callable
import logging

from estate_api.repositories.base import FeaturedRepository
from estate_api.models.property import Property, PropertyType, ListingStatus

logger = logging.getLogger(__name__)


class PropertyRepository(FeaturedRepository[Property]):
    """
    Repository for property listings.
    Adds type and status queries on top of the generic table operations.
    """

    def __init__(self, default_featured_limit: int = 6, clock: Optional[Callable[[], datetime]] = None):
        super().__init__(Property, default_featured_limit, clock)

    def _server_values(self) -> Dict[str, Any]:
        return {"created_at": self.clock()}

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Create a new property listing.

        Args:
            property_data: Validated insertable fields

        Returns:
            Created property with `id` and `created_at` set
        """
        property_obj = await self.create(property_data)
        logger.info(f"Created property: {property_obj.title} (ID: {property_obj.id})")
        return property_obj

    async def get_by_type(self, property_type: PropertyType) -> List[Property]:
        """
        Get properties of one type, in insertion order.

        Args:
            property_type: Property type to match exactly

        Returns:
            List of matching properties
        """
        return await self.filter_by(lambda prop: prop.property_type == property_type)

    async def get_by_status(self, listing_status: ListingStatus) -> List[Property]:
        """Get properties with the given listing status."""
        return await self.filter_by(lambda prop: prop.listing_status == listing_status)
