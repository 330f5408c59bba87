"""
Test configuration and fixtures for the NestFind API.
Provides database fixtures, an HTTP client bound to the app, and common users.
"""

import os
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.main import app as fastapi_app
from app.database import Base, get_db
from app.models.user import User, UserRole
from app.repositories.user import UserRepository
from app.repositories.property import PropertyRepository
from app.services.auth import AuthService
from app.services.property import PropertyService
from app.services.enquiry import EnquiryService
from app.services.saved import SavedPropertyService
from app.services.image import ImageService
from app.services.admin import AdminService
from app.services.seed import SeedService
from app.services.notification import NotificationService
from app.utils.dependencies import get_file_storage, get_notification_service
from app.utils.file_utils import FileStorage
from tests.factories import UserFactory

# Test database configuration
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")

API_PREFIX = "/api/v1"


@pytest.fixture
async def test_engine():
    """Fresh schema per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False} if "sqlite" in TEST_DATABASE_URL else {}
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


@pytest.fixture
def file_storage(tmp_path) -> FileStorage:
    """Upload storage rooted in the test's temporary directory."""
    return FileStorage(tmp_path / "uploads", "/media")


@pytest.fixture
def notifier() -> NotificationService:
    """Notification service with mail disabled."""
    return NotificationService(api_key="")


@pytest.fixture
async def client(
    db_session: AsyncSession,
    file_storage: FileStorage,
    notifier: NotificationService
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with database, storage and mail overrides."""
    async def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_file_storage] = lambda: file_storage
    fastapi_app.dependency_overrides[get_notification_service] = lambda: notifier

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as async_client:
        yield async_client

    fastapi_app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    return PropertyRepository(db_session)


# Service fixtures
@pytest.fixture
def auth_service(db_session: AsyncSession) -> AuthService:
    return AuthService(db_session)


@pytest.fixture
def property_service(db_session: AsyncSession, file_storage: FileStorage) -> PropertyService:
    return PropertyService(db_session, file_storage)


@pytest.fixture
def enquiry_service(db_session: AsyncSession, notifier: NotificationService) -> EnquiryService:
    return EnquiryService(db_session, notifier)


@pytest.fixture
def saved_service(db_session: AsyncSession) -> SavedPropertyService:
    return SavedPropertyService(db_session)


@pytest.fixture
def image_service(db_session: AsyncSession, file_storage: FileStorage) -> ImageService:
    return ImageService(db_session, file_storage)


@pytest.fixture
def admin_service(db_session: AsyncSession) -> AdminService:
    return AdminService(db_session)


@pytest.fixture
def seed_service(db_session: AsyncSession) -> SeedService:
    return SeedService(db_session)


# Common users
@pytest.fixture
async def test_buyer(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(user_repository, full_name="Test Buyer", role=UserRole.BUYER)


@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(user_repository, full_name="Test Owner", role=UserRole.OWNER)


@pytest.fixture
async def other_owner(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(user_repository, full_name="Other Owner", role=UserRole.OWNER)


@pytest.fixture
async def test_admin(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(user_repository, full_name="Test Admin", role=UserRole.ADMIN)
