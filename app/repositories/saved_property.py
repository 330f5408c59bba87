"""
Saved property repository: one bookmark row per (user, property) pair.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from app.repositories.base import BaseRepository
from app.models.saved_property import SavedProperty
from typing import List, Optional
import uuid
import logging

logger = logging.getLogger(__name__)


class SavedPropertyRepository(BaseRepository[SavedProperty]):

    def __init__(self, db: AsyncSession):
        super().__init__(SavedProperty, db)

    async def get_for_user(self, user_id: uuid.UUID, property_id: uuid.UUID) -> Optional[SavedProperty]:
        query = select(SavedProperty).where(
            SavedProperty.user_id == user_id,
            SavedProperty.property_id == property_id
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: uuid.UUID) -> List[SavedProperty]:
        query = (
            select(SavedProperty)
            .where(SavedProperty.user_id == user_id)
            .order_by(SavedProperty.created_at.desc(), SavedProperty.id.asc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def remove(self, user_id: uuid.UUID, property_id: uuid.UUID) -> bool:
        """Delete the bookmark if present. Returns whether a row was removed."""
        try:
            result = await self.db.execute(
                delete(SavedProperty).where(
                    SavedProperty.user_id == user_id,
                    SavedProperty.property_id == property_id
                )
            )
            await self.db.commit()
            return result.rowcount > 0
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to remove saved property {property_id} for {user_id}: {e}")
            raise
