"""
Property service for managing listings.
Turns missing rows into not-found errors and logs every mutation.
"""

from typing import Optional, List
import logging

from estate_api.storage import MemStorage
from estate_api.models.property import Property, PropertyType
from estate_api.schemas.property import PropertyCreate, PropertyUpdate
from estate_api.utils.exceptions import (
    PropertyNotFoundError,
    InternalServerError
)

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Property service wrapping the property repository.
    Unexpected repository failures surface as a generic internal error.
    """

    def __init__(self, storage: MemStorage):
        self.property_repo = storage.properties

    async def list_properties(self) -> List[Property]:
        """Get every listing in insertion order."""
        try:
            return await self.property_repo.get_all()
        except Exception as e:
            logger.error(f"Failed to list properties: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch properties")

    async def list_properties_by_type(self, property_type: PropertyType) -> List[Property]:
        """
        Get listings of a single type.

        Args:
            property_type: Already-parsed property type

        Returns:
            Matching listings
        """
        try:
            return await self.property_repo.get_by_type(property_type)
        except Exception as e:
            logger.error(f"Failed to list properties of type {property_type.value}: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch properties by type")

    async def get_featured_properties(self, limit: Optional[int] = None) -> List[Property]:
        """Get featured listings, newest first."""
        try:
            return await self.property_repo.get_featured(limit)
        except Exception as e:
            logger.error(f"Failed to get featured properties: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch featured properties")

    async def get_property(self, property_id: int) -> Property:
        """
        Get property by ID.

        Args:
            property_id: Identifier of the listing

        Returns:
            Property instance

        Raises:
            PropertyNotFoundError: If property doesn't exist
        """
        try:
            property_obj = await self.property_repo.get_by_id(property_id)
        except Exception as e:
            logger.error(f"Failed to get property {property_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch property")

        if property_obj is None:
            raise PropertyNotFoundError(property_id)
        return property_obj

    async def create_property(self, property_data: PropertyCreate) -> Property:
        """
        Create a new listing.

        Args:
            property_data: Validated property fields

        Returns:
            Created property with server-assigned fields
        """
        try:
            property_obj = await self.property_repo.create_property(property_data.model_dump())
        except Exception as e:
            logger.error(f"Failed to create property: {e}", exc_info=True)
            raise InternalServerError("Failed to create property")

        logger.info(f"Property created: {property_obj.title} (ID: {property_obj.id})")
        return property_obj

    async def update_property(self, property_id: int, property_data: PropertyUpdate) -> Property:
        """
        Apply a partial update to a listing.

        Args:
            property_id: Identifier of the listing
            property_data: Validated partial fields; absent fields are kept

        Returns:
            Updated property

        Raises:
            PropertyNotFoundError: If property doesn't exist
        """
        changes = property_data.present_fields()
        try:
            updated_property = await self.property_repo.update(property_id, changes)
        except Exception as e:
            logger.error(f"Failed to update property {property_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to update property")

        if updated_property is None:
            raise PropertyNotFoundError(property_id)

        if changes:
            logger.info(f"Property updated: {property_id} ({', '.join(sorted(changes))})")
        return updated_property

    async def delete_property(self, property_id: int) -> None:
        """
        Delete a listing.

        Raises:
            PropertyNotFoundError: If property doesn't exist
        """
        try:
            deleted = await self.property_repo.delete(property_id)
        except Exception as e:
            logger.error(f"Failed to delete property {property_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to delete property")

        if not deleted:
            raise PropertyNotFoundError(property_id)
        logger.info(f"Property deleted: {property_id}")
