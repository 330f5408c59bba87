"""
Seed service: bulk-inserts the curated and generated listing datasets.
"""

from typing import Iterable, List
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.property import PropertyRepository
from app.models.property import Property, PropertyType, ListingType, PropertyStatus
from app.models.user import User
from app.seed import OTTAWA_PROPERTIES, SEED_CITY, GeneratedProperty, generate_properties
from app.seed.reference_data import CITIES
from app.utils.exceptions import InsufficientPermissionsError, BadRequestError
import logging

logger = logging.getLogger(__name__)


class SeedService:
    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)

    @staticmethod
    def _to_row(record: GeneratedProperty, owner: User) -> dict:
        row = record.to_dict()
        row.update(
            property_type=PropertyType(record.property_type),
            listing_type=ListingType(record.listing_type),
            status=PropertyStatus.ACTIVE,
            owner_id=owner.id,
        )
        return row

    async def _insert(self, records: Iterable[GeneratedProperty], owner: User) -> List[Property]:
        if not owner.can_list_properties:
            raise InsufficientPermissionsError("seed properties")
        return await self.property_repo.bulk_create([self._to_row(record, owner) for record in records])

    async def seed_curated(self, current_user: User) -> List[Property]:
        """
        Insert the hand-written Ottawa listings, active and owned by the caller.

        Raises:
            InsufficientPermissionsError: If the caller is not an owner or admin
        """
        properties = await self._insert(OTTAWA_PROPERTIES, current_user)
        logger.info(f"Seeded {len(properties)} properties in {SEED_CITY} for {current_user.email}")
        return properties

    async def seed_generated(self, current_user: User, city_count: int) -> List[Property]:
        """
        Insert the generated listings for the first `city_count` cities.

        Raises:
            BadRequestError: If city_count is outside 1..len(CITIES)
            InsufficientPermissionsError: If the caller is not an owner or admin
        """
        if not 1 <= city_count <= len(CITIES):
            raise BadRequestError(f"cities must be between 1 and {len(CITIES)}")

        properties = await self._insert(generate_properties(city_count), current_user)
        logger.info(f"Seeded {len(properties)} generated properties across {city_count} cities for {current_user.email}")
        return properties
