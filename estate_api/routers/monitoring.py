"""
Health check endpoint.
Reports application metadata and the number of stored records per table.
"""

from fastapi import APIRouter, Depends, Request
from typing import Dict, Any
import logging

from estate_api.storage import MemStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=Dict[str, Any])
async def health_check(
    request: Request,
    storage: MemStorage = Depends(get_storage)
) -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns:
        Health status information
    """
    settings = request.app.state.settings
    counts = await storage.counts()

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "storage": {
            "backend": "memory",
            "records": counts
        }
    }
