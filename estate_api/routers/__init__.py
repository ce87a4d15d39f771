"""
API route handlers for the land brokerage API.
"""

from .properties import router as properties_router
from .blog import router as blog_router
from .contact import router as contact_router
from .monitoring import router as monitoring_router

__all__ = ["properties_router", "blog_router", "contact_router", "monitoring_router"]
