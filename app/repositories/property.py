"""
Property repository with the listing search query builder.
Every filter dimension is optional and all present dimensions are ANDed;
the free-text query is the only OR, across title, description, address and city.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_, or_, func, cast, false, Text
from sqlalchemy.sql.elements import ColumnElement
from app.repositories.base import BaseRepository
from app.models.property import Property, PropertyType, ListingType, PropertyStatus
from app.models.user import UserRole
from app.models.enquiry import Enquiry
from app.models.saved_property import SavedProperty
from typing import Callable, Dict, Optional, List, Sequence, Tuple
from decimal import Decimal
import json
import uuid
import logging

logger = logging.getLogger(__name__)

IMAGE_UPDATE_ATTEMPTS = 5

# Sort key -> ORDER BY clauses. The id tie-breaker keeps pages stable.
SORT_ORDERS = {
    "newest": (Property.created_at.desc(),),
    "oldest": (Property.created_at.asc(),),
    "price_asc": (Property.price.asc(),),
    "price_desc": (Property.price.desc(),),
}

# Listings a viewer manages, by role. None means no restriction.
PROPERTY_SCOPE: Dict[UserRole, Callable[[uuid.UUID], Optional[ColumnElement]]] = {
    UserRole.OWNER: lambda viewer_id: Property.owner_id == viewer_id,
    UserRole.ADMIN: lambda viewer_id: None,
    UserRole.BUYER: lambda viewer_id: false(),
}


class ConcurrentUpdateError(Exception):
    """A conditional update kept losing to concurrent writers."""


class PropertySearchFilters:
    """Criteria for a listing search. Unset (None) criteria add no constraint."""

    def __init__(
        self,
        query: Optional[str] = None,
        listing_type: Optional[ListingType] = None,
        property_type: Optional[PropertyType] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        bedrooms: Optional[int] = None,
        bathrooms: Optional[int] = None,
        min_sqft: Optional[int] = None,
        max_sqft: Optional[int] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        amenities: Optional[Sequence[str]] = None,
        north: Optional[float] = None,
        south: Optional[float] = None,
        east: Optional[float] = None,
        west: Optional[float] = None,
        status: Optional[PropertyStatus] = PropertyStatus.ACTIVE,
        require_coordinates: bool = False,
        scope: Optional[ColumnElement] = None
    ):
        self.query = query
        self.listing_type = listing_type
        self.property_type = property_type
        self.min_price = min_price
        self.max_price = max_price
        self.bedrooms = bedrooms
        self.bathrooms = bathrooms
        self.min_sqft = min_sqft
        self.max_sqft = max_sqft
        self.city = city
        self.state = state
        self.amenities = list(amenities or [])
        self.north = north
        self.south = south
        self.east = east
        self.west = west
        self.status = status
        self.require_coordinates = require_coordinates
        self.scope = scope

    @property
    def has_bounds(self) -> bool:
        return None not in (self.north, self.south, self.east, self.west)


class PropertyRepository(BaseRepository[Property]):
    """Listing persistence: search, map and featured queries plus image list updates."""

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def search_properties(
        self,
        filters: PropertySearchFilters,
        skip: int = 0,
        limit: int = 12,
        sort: str = "newest"
    ) -> Tuple[List[Property], int]:
        """
        Search listings with filtering, ordering and an offset window.

        Args:
            filters: PropertySearchFilters instance with search criteria
            skip: Number of matching rows to skip
            limit: Maximum number of rows to return
            sort: Key of SORT_ORDERS

        Returns:
            Tuple of (properties in the window, total matching count)
        """
        try:
            query = select(Property)
            count_query = select(func.count(Property.id))

            conditions = self._build_filter_conditions(filters)
            if conditions:
                query = query.where(and_(*conditions))
                count_query = count_query.where(and_(*conditions))

            total_count = (await self.db.execute(count_query)).scalar() or 0
            if skip >= total_count:
                logger.debug(f"Offset {skip} is past all {total_count} results")
                return [], total_count

            query = query.order_by(*SORT_ORDERS[sort], Property.id.asc())
            query = query.offset(skip).limit(limit)

            result = await self.db.execute(query)
            properties = list(result.scalars().all())

            logger.debug(f"Property search returned {len(properties)} of {total_count} total results")
            return properties, total_count
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise

    async def get_featured(self, limit: int) -> List[Property]:
        """Most recently created active listings; every other filter is ignored."""
        query = (
            select(Property)
            .where(Property.status == PropertyStatus.ACTIVE)
            .order_by(Property.created_at.desc(), Property.id.asc())
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> List[ColumnElement]:
        """
        Build SQLAlchemy filter conditions from search filters.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            List of SQLAlchemy conditions to be ANDed
        """
        conditions = []

        if filters.status is not None:
            conditions.append(Property.status == filters.status)

        if filters.scope is not None:
            conditions.append(filters.scope)

        if filters.query:
            conditions.append(or_(
                Property.title.icontains(filters.query, autoescape=True),
                Property.description.icontains(filters.query, autoescape=True),
                Property.address.icontains(filters.query, autoescape=True),
                Property.city.icontains(filters.query, autoescape=True),
            ))

        if filters.listing_type is not None:
            conditions.append(Property.listing_type == filters.listing_type)
        if filters.property_type is not None:
            conditions.append(Property.property_type == filters.property_type)

        if filters.min_price is not None:
            conditions.append(Property.price >= filters.min_price)
        if filters.max_price is not None:
            conditions.append(Property.price <= filters.max_price)

        if filters.bedrooms is not None:
            conditions.append(Property.bedrooms >= filters.bedrooms)
        if filters.bathrooms is not None:
            conditions.append(Property.bathrooms >= filters.bathrooms)

        if filters.min_sqft is not None:
            conditions.append(Property.sqft >= filters.min_sqft)
        if filters.max_sqft is not None:
            conditions.append(Property.sqft <= filters.max_sqft)

        if filters.city:
            conditions.append(Property.city.icontains(filters.city, autoescape=True))
        if filters.state:
            conditions.append(Property.state.icontains(filters.state, autoescape=True))

        # Amenities are a JSON array; each requested tag must appear as a quoted element
        amenities_text = cast(Property.amenities, Text)
        for amenity in filters.amenities:
            conditions.append(amenities_text.contains(json.dumps(amenity), autoescape=True))

        if filters.has_bounds:
            conditions.append(Property.latitude.between(filters.south, filters.north))
            conditions.append(Property.longitude.between(filters.west, filters.east))

        if filters.require_coordinates:
            conditions.append(Property.latitude.isnot(None))
            conditions.append(Property.longitude.isnot(None))

        return conditions

    async def update_images(
        self,
        property_id: uuid.UUID,
        mutate: Callable[[List[str]], List[str]]
    ) -> Optional[List[str]]:
        """
        Apply `mutate` to a listing's image list as an atomic compare-and-set.

        The write only lands if `images_version` is unchanged since the read;
        otherwise the list is re-read and `mutate` re-applied. `mutate` may raise
        to abort (for example when a limit would be exceeded).

        Returns:
            The stored image list, or None if the listing does not exist

        Raises:
            ConcurrentUpdateError: If every attempt lost to a concurrent writer
        """
        for attempt in range(1, IMAGE_UPDATE_ATTEMPTS + 1):
            current = await self.get_by_id(property_id)
            if current is None:
                return None

            new_images = mutate(list(current.images or []))
            stmt = (
                update(Property)
                .where(
                    Property.id == property_id,
                    Property.images_version == current.images_version
                )
                .values(images=new_images, images_version=current.images_version + 1)
                .execution_options(synchronize_session=False)
            )
            try:
                result = await self.db.execute(stmt)
                if result.rowcount == 1:
                    await self.db.commit()
                    logger.debug(f"Updated images for property {property_id} (attempt {attempt})")
                    return new_images
                await self.db.rollback()
            except Exception as e:
                await self.db.rollback()
                logger.error(f"Failed to update images for property {property_id}: {e}")
                raise

            logger.warning(f"Image list for property {property_id} changed concurrently, retrying")

        raise ConcurrentUpdateError(f"Images for property {property_id} are being modified concurrently")

    async def update_if_images_unchanged(
        self,
        property_id: uuid.UUID,
        values: Dict,
        expected_version: int
    ) -> bool:
        """
        Write `values`, which include a new image list, only if `images_version`
        still equals `expected_version`. Bumps the version on success.

        Returns:
            True if the row was written, False if the version moved or the row is gone
        """
        stmt = (
            update(Property)
            .where(
                Property.id == property_id,
                Property.images_version == expected_version
            )
            .values(**values, images_version=expected_version + 1)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
            if result.rowcount != 1:
                await self.db.rollback()
                logger.warning(f"Image list for property {property_id} moved past version {expected_version}")
                return False
            await self.db.commit()
            return True
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to update property {property_id}: {e}")
            raise

    async def delete_property(self, property_id: uuid.UUID) -> bool:
        """Delete a listing with its enquiries and saved rows in one transaction."""
        try:
            await self.db.execute(delete(Enquiry).where(Enquiry.property_id == property_id))
            await self.db.execute(delete(SavedProperty).where(SavedProperty.property_id == property_id))
            result = await self.db.execute(delete(Property).where(Property.id == property_id))
            await self.db.commit()
            return result.rowcount > 0
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to delete property {property_id}: {e}")
            raise
