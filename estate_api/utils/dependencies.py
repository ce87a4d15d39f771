"""
FastAPI dependency injection utilities.
Builds per-request services on top of the application's store.
"""

from fastapi import Depends
from estate_api.storage import MemStorage, get_storage
from estate_api.services.property import PropertyService
from estate_api.services.blog import BlogService
from estate_api.services.contact import ContactService


async def get_property_service(storage: MemStorage = Depends(get_storage)) -> PropertyService:
    """
    Get property service instance.

    Args:
        storage: Application store

    Returns:
        PropertyService instance
    """
    return PropertyService(storage)


async def get_blog_service(storage: MemStorage = Depends(get_storage)) -> BlogService:
    """Get blog service instance."""
    return BlogService(storage)


async def get_contact_service(storage: MemStorage = Depends(get_storage)) -> ContactService:
    """Get contact service instance."""
    return ContactService(storage)
