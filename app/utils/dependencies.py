"""
FastAPI dependency injection utilities for authentication and services.
Provides reusable dependencies for route protection and user extraction.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.models.user import User, UserRole
from app.services.auth import AuthService
from app.services.property import PropertyService
from app.services.enquiry import EnquiryService
from app.services.saved import SavedPropertyService
from app.services.image import ImageService
from app.services.notification import NotificationService
from app.services.admin import AdminService
from app.services.seed import SeedService
from app.utils.exceptions import (
    APIException,
    UnauthorizedError,
    InactiveUserError,
    InsufficientPermissionsError
)
from app.utils.file_utils import FileStorage


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def get_file_storage() -> FileStorage:
    return FileStorage()


def get_notification_service() -> NotificationService:
    return NotificationService()


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


async def get_property_service(
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage)
) -> PropertyService:
    return PropertyService(db, storage)


async def get_enquiry_service(
    db: AsyncSession = Depends(get_db),
    notifier: NotificationService = Depends(get_notification_service)
) -> EnquiryService:
    return EnquiryService(db, notifier)


async def get_saved_service(db: AsyncSession = Depends(get_db)) -> SavedPropertyService:
    return SavedPropertyService(db)


async def get_image_service(
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage)
) -> ImageService:
    return ImageService(db, storage)


async def get_admin_service(db: AsyncSession = Depends(get_db)) -> AdminService:
    return AdminService(db)


async def get_seed_service(db: AsyncSession = Depends(get_db)) -> SeedService:
    return SeedService(db)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    """
    Get current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer credentials
        auth_service: Authentication service

    Returns:
        Current User object

    Raises:
        UnauthorizedError: If no token provided or token is invalid
        TokenExpiredError: If token is expired
        InactiveUserError: If user account is inactive
    """
    if not credentials:
        raise UnauthorizedError("Authentication token required")

    try:
        return await auth_service.get_current_user(credentials.credentials)
    except APIException:
        raise
    except Exception as e:
        raise UnauthorizedError(f"Authentication failed: {str(e)}")


async def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    if not current_user.is_active:
        raise InactiveUserError()
    return current_user


def require_roles(*roles: UserRole, action: str = "perform this action"):
    """
    Create a dependency that admits only the given roles.

    Args:
        roles: Roles allowed through
        action: Phrase used in the 403 message

    Returns:
        Dependency function
    """
    async def role_dependency(
        current_user: User = Depends(get_current_active_user)
    ) -> User:
        if current_user.role not in roles:
            raise InsufficientPermissionsError(action)
        return current_user

    return role_dependency


get_listing_manager = require_roles(UserRole.OWNER, UserRole.ADMIN, action="manage listings")
get_current_admin_user = require_roles(UserRole.ADMIN, action="access admin resources")


# Optional authentication for public endpoints that behave differently for owners and admins
async def get_optional_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[User]:
    """
    Get current user if token is provided and valid, otherwise return None.
    """
    if not credentials:
        return None

    try:
        return await auth_service.get_current_user(credentials.credentials)
    except APIException:
        return None
