"""
Property service for listing search and management.
Handles the public search, map and featured queries, owner listings,
visibility of non-active listings, and ownership checks on mutations.
"""

from typing import Optional, List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import get_settings
from app.repositories.property import PropertyRepository, PropertySearchFilters, PROPERTY_SCOPE
from app.models.property import Property, PropertyStatus
from app.models.user import User
from app.schemas.property import PropertyCreate, PropertyUpdate, PropertySearchParams, MapSearchParams
from app.utils.exceptions import (
    APIException,
    ConflictError,
    NotFoundError,
    InsufficientPermissionsError,
)
from app.utils.file_utils import FileStorage
from app.utils.pagination import page_window
import uuid
import logging

settings = get_settings()
logger = logging.getLogger(__name__)


class PropertyService:
    """
    Property service for managing property listings.
    Handles CRUD operations, ownership validation and search functionality.
    """

    def __init__(self, db_session: AsyncSession, storage: Optional[FileStorage] = None):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)
        self.storage = storage

    @staticmethod
    def _filters_from(params: PropertySearchParams, **overrides) -> PropertySearchFilters:
        criteria = dict(
            query=params.query,
            listing_type=params.listing_type,
            property_type=params.property_type,
            min_price=params.min_price,
            max_price=params.max_price,
            bedrooms=params.bedrooms,
            bathrooms=params.bathrooms,
            min_sqft=params.min_sqft,
            max_sqft=params.max_sqft,
            city=params.city,
            state=params.state,
            amenities=params.amenities,
            north=params.north,
            south=params.south,
            east=params.east,
            west=params.west,
        )
        criteria.update(overrides)
        return PropertySearchFilters(**criteria)

    async def search_properties(self, params: PropertySearchParams) -> Tuple[List[Property], int]:
        """
        Public search over active listings.

        Args:
            params: Validated search criteria; page is already clamped to >= 1

        Returns:
            Tuple of (properties on the requested page, total matching count)
        """
        skip, limit = page_window(params.page, params.limit)
        properties, total = await self.property_repo.search_properties(
            self._filters_from(params),
            skip=skip,
            limit=limit,
            sort=params.sort.value
        )
        logger.debug(f"Search page {params.page} returned {len(properties)} of {total}")
        return properties, total

    async def get_featured(self, count: int) -> List[Property]:
        """The `count` newest active listings, capped at `featured_max`."""
        return await self.property_repo.get_featured(min(count, settings.featured_max))

    async def map_search(self, params: MapSearchParams) -> Tuple[List[Property], int]:
        """
        Active listings with coordinates inside the viewport.

        Returns:
            Tuple of (at most `map_result_limit` properties, total matching count)
        """
        filters = self._filters_from(params, require_coordinates=True)
        return await self.property_repo.search_properties(
            filters,
            skip=0,
            limit=settings.map_result_limit,
            sort=params.sort.value
        )

    async def list_mine(self, current_user: User, page: int, limit: int) -> Tuple[List[Property], int]:
        """
        Listings managed by the caller in every status.
        Owners see their own, admins see all, buyers see none.
        """
        skip, limit = page_window(page, limit)
        filters = PropertySearchFilters(
            status=None,
            scope=PROPERTY_SCOPE[current_user.role](current_user.id)
        )
        return await self.property_repo.search_properties(filters, skip=skip, limit=limit, sort="newest")

    async def get_property(self, property_id: uuid.UUID, current_user: Optional[User] = None) -> Property:
        """
        Get a listing by ID.

        Non-active listings exist only for their owner and admins; everyone
        else gets the same 404 as for a missing listing.

        Raises:
            NotFoundError: If property doesn't exist or is hidden from the caller
        """
        property_obj = await self.property_repo.get_by_id(property_id)

        if not property_obj:
            raise NotFoundError("Property", str(property_id))

        if property_obj.status != PropertyStatus.ACTIVE:
            if current_user is None or not current_user.can_manage_property(property_obj.owner_id):
                raise NotFoundError("Property", str(property_id))

        logger.debug(f"Retrieved property: {property_id}")
        return property_obj

    async def get_managed_property(self, property_id: uuid.UUID, current_user: User, action: str) -> Property:
        """
        Load a listing the caller is allowed to change.

        Raises:
            NotFoundError: If property doesn't exist
            InsufficientPermissionsError: If caller is neither the owner nor an admin
        """
        property_obj = await self.property_repo.get_by_id(property_id)
        if not property_obj:
            raise NotFoundError("Property", str(property_id))

        if not current_user.can_manage_property(property_obj.owner_id):
            logger.warning(f"User {current_user.id} denied permission to {action} property {property_id}")
            raise InsufficientPermissionsError(f"{action} this property")

        return property_obj

    async def create_property(self, property_data: PropertyCreate, current_user: User) -> Property:
        """
        Create a new property listing owned by the caller.

        Args:
            property_data: Property creation data
            current_user: User creating the property

        Returns:
            Created property instance

        Raises:
            InsufficientPermissionsError: If user is not an owner or admin
        """
        if not current_user.can_list_properties:
            raise InsufficientPermissionsError("create properties")

        create_data = property_data.model_dump()
        create_data["owner_id"] = current_user.id

        property_obj = await self.property_repo.create(create_data)
        logger.info(f"Property created by user {current_user.email}: {property_obj.title} (ID: {property_obj.id})")
        return await self.property_repo.get_by_id(property_obj.id)

    async def update_property(
        self,
        property_id: uuid.UUID,
        property_data: PropertyUpdate,
        current_user: User
    ) -> Property:
        """
        Update the whitelisted fields of a listing.

        Args:
            property_id: UUID of the property to update
            property_data: Fields present in the request body
            current_user: Owner of the listing or an admin

        Returns:
            Updated property instance

        Raises:
            NotFoundError: If property doesn't exist
            InsufficientPermissionsError: If caller may not update the listing
            ConflictError: If the image list changed after it was read
        """
        try:
            existing = await self.get_managed_property(property_id, current_user, "update")
            read_version = existing.images_version

            update_data = property_data.model_dump(exclude_unset=True)
            if "images" in update_data:
                written = await self.property_repo.update_if_images_unchanged(
                    property_id, update_data, read_version
                )
                if not written:
                    raise ConflictError(f"Images for property {property_id} were changed concurrently")
                logger.info(f"Property updated by user {current_user.email}: {property_id} ({', '.join(update_data)})")
                return await self.property_repo.get_by_id(property_id)

            updated_property = await self.property_repo.update(property_id, update_data)
            if not updated_property:
                raise NotFoundError("Property", str(property_id))

            logger.info(f"Property updated by user {current_user.email}: {property_id} ({', '.join(update_data) or 'no changes'})")
            return updated_property
        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to update property {property_id}: {e}")
            raise

    async def delete_property(self, property_id: uuid.UUID, current_user: User) -> None:
        """
        Delete a listing, its stored images, enquiries and saved rows.

        Raises:
            NotFoundError: If property doesn't exist
            InsufficientPermissionsError: If caller may not delete the listing
        """
        property_obj = await self.get_managed_property(property_id, current_user, "delete")
        stored_images = list(property_obj.images or [])

        deleted = await self.property_repo.delete_property(property_id)
        if not deleted:
            raise NotFoundError("Property", str(property_id))

        # Files go only once the row is gone
        if self.storage is not None:
            for url in stored_images:
                self.storage.delete_url(url)

        logger.info(f"Property deleted by user {current_user.email}: {property_id}")
