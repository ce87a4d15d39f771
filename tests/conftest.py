"""
Test configuration and fixtures for the land brokerage API.
Provides fresh stores, repositories, services, test clients and data factories.
"""

import pytest
import pytest_asyncio
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Generator, Optional, List
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from estate_api.config import Settings
from estate_api.main import create_app
from estate_api.storage import MemStorage
from estate_api.models.property import Property
from estate_api.models.blog import BlogPost
from estate_api.repositories import (
    PropertyRepository,
    BlogPostRepository,
    ContactSubmissionRepository,
    UserRepository
)
from estate_api.schemas.property import PropertyCreate
from estate_api.schemas.blog import BlogPostCreate
from estate_api.services.property import PropertyService
from estate_api.services.blog import BlogService
from estate_api.services.contact import ContactService
from estate_api.services.user import UserService


class FakeClock:
    """Deterministic time source; each call moves forward by `step`, a zero step freezes it."""

    def __init__(self, start: Optional[datetime] = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated, unseeded application."""
    return Settings(environment="testing", seed_sample_data=False, log_level="WARNING")


@pytest.fixture
def storage(test_settings: Settings) -> MemStorage:
    """Create an empty store."""
    return MemStorage(test_settings)


@pytest.fixture
def app(test_settings: Settings, storage: MemStorage):
    """Create an application serving the test store."""
    return create_app(test_settings, storage)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client bound to a fresh application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client bound to a fresh application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# Repository fixtures
@pytest.fixture
def property_repository(clock: FakeClock) -> PropertyRepository:
    """Create a property repository with a deterministic clock."""
    return PropertyRepository(default_featured_limit=6, clock=clock)


@pytest.fixture
def blog_repository(clock: FakeClock) -> BlogPostRepository:
    """Create a blog post repository with a deterministic clock."""
    return BlogPostRepository(default_featured_limit=3, clock=clock)


@pytest.fixture
def contact_repository(clock: FakeClock) -> ContactSubmissionRepository:
    return ContactSubmissionRepository(clock=clock)


@pytest.fixture
def user_repository() -> UserRepository:
    return UserRepository()


# Service fixtures
@pytest.fixture
def property_service(storage: MemStorage) -> PropertyService:
    """Create a property service instance."""
    return PropertyService(storage)


@pytest.fixture
def blog_service(storage: MemStorage) -> BlogService:
    """Create a blog service instance."""
    return BlogService(storage)


@pytest.fixture
def contact_service(storage: MemStorage) -> ContactService:
    """Create a contact service instance."""
    return ContactService(storage)


@pytest.fixture
def user_service(storage: MemStorage) -> UserService:
    """Create a user service instance."""
    return UserService(storage)


# Test data factories
class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        title: str = "Plot A",
        price: int = 1000000,
        area: int = 5,
        property_type: str = "land",
        listing_status: str = "for_sale",
        is_featured: bool = False,
        **overrides
    ) -> dict:
        """Create a camelCase payload as a client would send it."""
        data = {
            "title": title,
            "description": "Flat plot with road access",
            "price": price,
            "area": area,
            "areaUnit": "acres",
            "location": "Pune",
            "address": "Survey No. 12, Hinjewadi",
            "city": "Pune",
            "state": "Maharashtra",
            "propertyType": property_type,
            "listingStatus": listing_status,
            "featuredImage": "https://example.com/plot-a.jpg",
            "isFeatured": is_featured,
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(repo: PropertyRepository, **kwargs) -> Property:
        """Create a test property directly in a repository."""
        schema = PropertyCreate.model_validate(PropertyFactory.create_property_data(**kwargs))
        return await repo.create_property(schema.model_dump())


class BlogPostFactory:
    """Factory for creating test blog posts."""

    @staticmethod
    def create_post_data(
        title: str = "Buying Farmland",
        category: str = "Investment",
        is_featured: bool = False,
        **overrides
    ) -> dict:
        data = {
            "title": title,
            "content": "<p>Check the title deed first.</p>",
            "summary": "What to check before buying farmland",
            "authorName": "Rajiv Sharma",
            "category": category,
            "featuredImage": "https://example.com/farmland.jpg",
            "isFeatured": is_featured,
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_post(repo: BlogPostRepository, **kwargs) -> BlogPost:
        schema = BlogPostCreate.model_validate(BlogPostFactory.create_post_data(**kwargs))
        return await repo.create(schema.model_dump())


class ContactFactory:
    """Factory for contact form payloads."""

    @staticmethod
    def create_submission_data(**overrides) -> dict:
        data = {
            "name": "Anita Desai",
            "email": "anita@example.com",
            "phone": "+91 98765 43210",
            "interest": "Agricultural land",
            "message": "Please call me about the Nashik plot.",
        }
        data.update(overrides)
        return data


# Test utilities
def assert_property_equal(prop1: Property, prop2: Property):
    """Assert that two properties hold the same values."""
    assert prop1.to_dict() == prop2.to_dict()


def field_names(body: dict) -> List[str]:
    """Field names listed in an error response body."""
    return [error["field"] for error in body.get("errors", [])]
