"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from pydantic import ValidationError as PydanticValidationError
from typing import Optional
import logging

from estate_api import __version__
from estate_api.config import Settings, get_settings
from estate_api.storage import MemStorage
from estate_api.seed import seed_sample_data
from estate_api.routers import properties_router, blog_router, contact_router, monitoring_router
from estate_api.utils.exceptions import APIException
from estate_api.services.error_handler import ErrorHandlerService
from estate_api.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[MemStorage] = None) -> FastAPI:
    """
    Build the application around a settings object and a store.

    Args:
        settings: Application settings, defaults to the cached environment settings
        storage: Store to serve from, a fresh empty one is created when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    storage = storage if storage is not None else MemStorage(settings)

    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        Seeds sample data on startup when enabled.
        """
        # Startup
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.info(f"Environment: {settings.environment}")

        if settings.seed_sample_data:
            await seed_sample_data(app.state.storage)

        yield

        # Shutdown
        logger.info("Shutting down application")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
    Backend for a land and property brokerage website.

    ## Features

    * **Properties**: Listings with featured and type filters
    * **Blog**: Articles with featured and category filters
    * **Contact**: Enquiry submissions with read tracking
    """,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "Properties",
                "description": "Property listing management"
            },
            {
                "name": "Blog",
                "description": "Blog post management"
            },
            {
                "name": "Contact",
                "description": "Contact form submissions"
            },
            {
                "name": "Health",
                "description": "System health endpoints"
            }
        ],
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.storage = storage

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Processing-Time"],
    )

    app.add_middleware(
        RequestLoggingMiddleware,
        enable_detailed_logging=settings.debug,
        slow_request_threshold=settings.slow_request_threshold,
    )

    # Include API routers
    app.include_router(properties_router, prefix=settings.api_prefix)
    app.include_router(blog_router, prefix=settings.api_prefix)
    app.include_router(contact_router, prefix=settings.api_prefix)
    app.include_router(monitoring_router, prefix=settings.api_prefix)

    # Global exception handlers using ErrorHandlerService
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle custom API exceptions with structured error responses."""
        return ErrorHandlerService.handle_api_exception(exc, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle FastAPI request validation errors with detailed field information."""
        return ErrorHandlerService.handle_validation_error(exc, request)

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_exception_handler(request: Request, exc: PydanticValidationError):
        """Handle Pydantic validation errors with detailed field information."""
        return ErrorHandlerService.handle_validation_error(exc, request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle unknown routes and other framework HTTP errors."""
        return ErrorHandlerService.handle_http_exception(exc, request)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with secure error responses."""
        return ErrorHandlerService.handle_unexpected_error(exc, request)

    @app.get("/", tags=["Health"])
    async def root():
        """
        Root endpoint providing basic API information.
        """
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "build": __version__,
            "environment": settings.environment,
            "status": "healthy",
            "documentation": {
                "swagger_ui": "/docs",
                "redoc": "/redoc",
                "openapi_json": "/openapi.json"
            },
            "api_prefix": settings.api_prefix
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "estate_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
