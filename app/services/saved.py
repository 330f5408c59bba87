"""
Saved property service: per-user bookmarks of listings.
"""

from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.saved_property import SavedPropertyRepository
from app.repositories.property import PropertyRepository
from app.models.saved_property import SavedProperty
from app.models.user import User
from app.utils.exceptions import NotFoundError, DuplicateResourceError
import uuid
import logging

logger = logging.getLogger(__name__)


class SavedPropertyService:
    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.saved_repo = SavedPropertyRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    async def list_saved(self, current_user: User) -> List[SavedProperty]:
        return await self.saved_repo.list_for_user(current_user.id)

    async def save_property(self, property_id: uuid.UUID, current_user: User) -> SavedProperty:
        """
        Bookmark a listing.

        Raises:
            NotFoundError: If the listing doesn't exist
            DuplicateResourceError: If the caller already saved it
        """
        if not await self.property_repo.exists(property_id):
            raise NotFoundError("Property", str(property_id))

        if await self.saved_repo.get_for_user(current_user.id, property_id):
            raise DuplicateResourceError("Property already saved")

        try:
            saved = await self.saved_repo.create({"user_id": current_user.id, "property_id": property_id})
        except IntegrityError:
            # Lost a race with a concurrent save of the same pair
            raise DuplicateResourceError("Property already saved")

        logger.info(f"User {current_user.email} saved property {property_id}")
        return await self.saved_repo.get_by_id(saved.id)

    async def unsave_property(self, property_id: uuid.UUID, current_user: User) -> None:
        """Remove a bookmark. Removing one that doesn't exist is not an error."""
        removed = await self.saved_repo.remove(current_user.id, property_id)
        if removed:
            logger.info(f"User {current_user.email} unsaved property {property_id}")
