"""
Tests for the service layer.
Covers not-found mapping, partial updates, failure wrapping, accounts and sample data loading.
"""

import pytest

from estate_api.storage import MemStorage
from estate_api.models.property import PropertyType
from estate_api.schemas.property import PropertyCreate, PropertyUpdate
from estate_api.schemas.blog import BlogPostCreate, BlogPostUpdate
from estate_api.schemas.contact import ContactSubmissionCreate
from estate_api.schemas.user import UserCreate
from estate_api.services.property import PropertyService
from estate_api.services.blog import BlogService
from estate_api.services.contact import ContactService
from estate_api.services.user import UserService
from estate_api.seed import seed_sample_data, SAMPLE_PROPERTIES, SAMPLE_BLOG_POSTS
from estate_api.utils.exceptions import (
    PropertyNotFoundError,
    BlogPostNotFoundError,
    ContactSubmissionNotFoundError,
    UserNotFoundError,
    DuplicateResourceError,
    InternalServerError,
    ValidationError
)
from tests.conftest import PropertyFactory, BlogPostFactory, ContactFactory


def property_create(**kwargs) -> PropertyCreate:
    return PropertyCreate.model_validate(PropertyFactory.create_property_data(**kwargs))


def post_create(**kwargs) -> BlogPostCreate:
    return BlogPostCreate.model_validate(BlogPostFactory.create_post_data(**kwargs))


class TestPropertyService:
    """Test property service business logic."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, property_service: PropertyService):
        created = await property_service.create_property(property_create())
        fetched = await property_service.get_property(created.id)

        assert fetched.id == 1
        assert fetched.title == "Plot A"
        assert fetched.property_type == PropertyType.LAND

    @pytest.mark.asyncio
    async def test_get_missing_property(self, property_service: PropertyService):
        with pytest.raises(PropertyNotFoundError) as exc_info:
            await property_service.get_property(999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Property not found with ID: 999"

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, property_service: PropertyService):
        created = await property_service.create_property(property_create(amenities=["Road Access"]))

        updated = await property_service.update_property(
            created.id, PropertyUpdate.model_validate({"price": 1500000})
        )

        assert updated.price == 1500000
        assert updated.amenities == ["Road Access"]
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_can_clear_nullable_field(self, property_service: PropertyService):
        created = await property_service.create_property(property_create(zipCode="411057"))

        updated = await property_service.update_property(
            created.id, PropertyUpdate.model_validate({"zipCode": None})
        )
        assert updated.zip_code is None

    @pytest.mark.asyncio
    async def test_update_missing_property(self, property_service: PropertyService):
        with pytest.raises(PropertyNotFoundError):
            await property_service.update_property(5, PropertyUpdate.model_validate({"price": 1}))

    @pytest.mark.asyncio
    async def test_delete_property(self, property_service: PropertyService):
        created = await property_service.create_property(property_create())
        await property_service.delete_property(created.id)

        with pytest.raises(PropertyNotFoundError):
            await property_service.get_property(created.id)
        with pytest.raises(PropertyNotFoundError):
            await property_service.delete_property(created.id)

    @pytest.mark.asyncio
    async def test_list_by_type(self, property_service: PropertyService):
        await property_service.create_property(property_create(title="Farm"))
        await property_service.create_property(property_create(title="Office", property_type="commercial"))

        commercial = await property_service.list_properties_by_type(PropertyType.COMMERCIAL)
        assert [prop.title for prop in commercial] == ["Office"]

    @pytest.mark.asyncio
    async def test_featured_uses_configured_default(self):
        storage = MemStorage()
        storage.properties.default_featured_limit = 2
        service = PropertyService(storage)
        for index in range(3):
            await service.create_property(property_create(title=f"Plot {index}", is_featured=True))

        assert len(await service.get_featured_properties()) == 2

    @pytest.mark.asyncio
    async def test_repository_failure_becomes_internal_error(
        self, property_service: PropertyService, storage: MemStorage, monkeypatch
    ):
        async def broken_get_all():
            raise RuntimeError("table unavailable")

        monkeypatch.setattr(storage.properties, "get_all", broken_get_all)

        with pytest.raises(InternalServerError) as exc_info:
            await property_service.list_properties()
        assert exc_info.value.detail == "Failed to fetch properties"


class TestBlogService:
    """Test blog service business logic."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, blog_service: BlogService):
        created = await blog_service.create_post(post_create())
        fetched = await blog_service.get_post(created.id)

        assert fetched.title == "Buying Farmland"
        assert fetched.published_date is not None

    @pytest.mark.asyncio
    async def test_get_missing_post(self, blog_service: BlogService):
        with pytest.raises(BlogPostNotFoundError) as exc_info:
            await blog_service.get_post(3)
        assert exc_info.value.detail == "Blog post not found with ID: 3"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, blog_service: BlogService):
        created = await blog_service.create_post(post_create())

        updated = await blog_service.update_post(created.id, BlogPostUpdate.model_validate({"isFeatured": True}))
        assert updated.is_featured is True
        assert updated.published_date == created.published_date

        await blog_service.delete_post(created.id)
        with pytest.raises(BlogPostNotFoundError):
            await blog_service.delete_post(created.id)

    @pytest.mark.asyncio
    async def test_list_by_category(self, blog_service: BlogService):
        await blog_service.create_post(post_create(title="A", category="Finance"))
        await blog_service.create_post(post_create(title="B", category="Legal"))

        posts = await blog_service.list_posts_by_category("Legal")
        assert [post.title for post in posts] == ["B"]

    @pytest.mark.asyncio
    async def test_featured_posts(self, blog_service: BlogService):
        await blog_service.create_post(post_create(title="A", is_featured=True))
        await blog_service.create_post(post_create(title="B"))

        featured = await blog_service.get_featured_posts()
        assert [post.title for post in featured] == ["A"]


class TestContactService:
    """Test contact submissions."""

    @pytest.mark.asyncio
    async def test_submit_and_mark_read(self, contact_service: ContactService):
        payload = ContactSubmissionCreate.model_validate(ContactFactory.create_submission_data())
        submission = await contact_service.submit(payload)

        assert submission.is_read is False

        read = await contact_service.mark_as_read(submission.id)
        assert read.is_read is True
        assert (await contact_service.get_submission(submission.id)).is_read is True

    @pytest.mark.asyncio
    async def test_missing_submission(self, contact_service: ContactService):
        with pytest.raises(ContactSubmissionNotFoundError) as exc_info:
            await contact_service.mark_as_read(8)
        assert exc_info.value.detail == "Submission not found with ID: 8"

    @pytest.mark.asyncio
    async def test_list_submissions(self, contact_service: ContactService):
        for name in ("First", "Second"):
            payload = ContactSubmissionCreate.model_validate(ContactFactory.create_submission_data(name=name))
            await contact_service.submit(payload)

        submissions = await contact_service.list_submissions()
        assert [submission.name for submission in submissions] == ["First", "Second"]


class TestUserService:
    """Test account management."""

    @pytest.mark.asyncio
    async def test_create_and_authenticate(self, user_service: UserService):
        user = await user_service.create_user(UserCreate(username="admin", password="s3cret-pass"))

        assert await user_service.authenticate("admin", "s3cret-pass") == user
        assert await user_service.authenticate("admin", "wrong-pass") is None
        assert await user_service.authenticate("nobody", "s3cret-pass") is None

    @pytest.mark.asyncio
    async def test_create_from_raw_dict(self, user_service: UserService):
        user = await user_service.create_user({"username": "editor", "password": "long-enough"})
        assert (await user_service.get_user(user.id)).username == "editor"

    @pytest.mark.asyncio
    async def test_invalid_raw_dict(self, user_service: UserService):
        with pytest.raises(ValidationError) as exc_info:
            await user_service.create_user({"username": "ed", "password": "short"})

        fields = {error["field"] for error in exc_info.value.field_errors}
        assert fields == {"username", "password"}

    @pytest.mark.asyncio
    async def test_duplicate_username(self, user_service: UserService):
        await user_service.create_user({"username": "admin", "password": "s3cret-pass"})

        with pytest.raises(DuplicateResourceError) as exc_info:
            await user_service.create_user({"username": "admin", "password": "another-pass"})
        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_missing_user(self, user_service: UserService):
        with pytest.raises(UserNotFoundError):
            await user_service.get_user(1)
        assert await user_service.get_user_by_username("admin") is None


class TestSampleData:
    """Test the startup sample data loader."""

    @pytest.mark.asyncio
    async def test_seed_loads_every_record(self, storage: MemStorage):
        await seed_sample_data(storage)

        assert await storage.properties.count() == len(SAMPLE_PROPERTIES)
        assert await storage.blog_posts.count() == len(SAMPLE_BLOG_POSTS)
        assert await storage.contact_submissions.count() == 0

    @pytest.mark.asyncio
    async def test_seed_featured_listings(self, storage: MemStorage):
        await seed_sample_data(storage)

        featured = await storage.properties.get_featured()
        assert len(featured) == 3
        assert all(prop.property_type == PropertyType.LAND for prop in featured)

    @pytest.mark.asyncio
    async def test_seed_skips_populated_tables(self, storage: MemStorage, property_service: PropertyService):
        await property_service.create_property(property_create())

        await seed_sample_data(storage)

        assert await storage.properties.count() == 1
        assert await storage.blog_posts.count() == len(SAMPLE_BLOG_POSTS)
