"""
Admin service: platform statistics, listing moderation and user roles.
"""

from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.property import PropertyRepository
from app.repositories.user import UserRepository
from app.repositories.enquiry import EnquiryRepository
from app.models.property import Property, PropertyStatus
from app.models.user import User, UserRole
from app.utils.exceptions import NotFoundError, BadRequestError
from app.utils.pagination import page_window
import uuid
import logging

logger = logging.getLogger(__name__)


class AdminService:
    """Read-mostly views over every account and listing. Callers must be admins."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)
        self.user_repo = UserRepository(db_session)
        self.enquiry_repo = EnquiryRepository(db_session)

    async def get_stats(self) -> dict:
        return {
            "total_users": await self.user_repo.count(),
            "total_listings": await self.property_repo.count(),
            "active_listings": await self.property_repo.count(Property.status == PropertyStatus.ACTIVE),
            "total_enquiries": await self.enquiry_repo.count(),
        }

    async def list_listings(self, page: int, limit: int) -> Tuple[List[Property], int]:
        """Every listing in any status, newest first."""
        skip, limit = page_window(page, limit)
        properties = await self.property_repo.get_multi(skip=skip, limit=limit)
        total = await self.property_repo.count()
        return properties, total

    async def list_users(self) -> List[User]:
        return await self.user_repo.list_all()

    async def update_user_role(self, user_id: uuid.UUID, new_role: UserRole, current_user: User) -> User:
        """
        Change a user's role.

        Args:
            user_id: UUID of the user to update
            new_role: Role to assign
            current_user: Admin making the change

        Returns:
            Updated user

        Raises:
            BadRequestError: If an admin tries to drop their own admin role
            NotFoundError: If the user doesn't exist
        """
        if user_id == current_user.id and new_role != UserRole.ADMIN:
            raise BadRequestError("Admins cannot remove their own admin role")

        updated_user = await self.user_repo.update(user_id, {"role": new_role})
        if not updated_user:
            raise NotFoundError("User", str(user_id))

        logger.info(f"User role updated by {current_user.email}: {user_id} -> {new_role.value}")
        return updated_user
