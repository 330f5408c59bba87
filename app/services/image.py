"""
Image service for listing photos and profile avatars.
Handles validation, storage and atomic updates of a listing's image list.
"""

import asyncio
from typing import List, Optional, Tuple
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import get_settings
from app.models.user import User
from app.repositories.property import PropertyRepository, ConcurrentUpdateError
from app.repositories.user import UserRepository
from app.utils.exceptions import (
    NotFoundError,
    BadRequestError,
    ConflictError,
    InsufficientPermissionsError,
    ResourceLimitExceededError,
)
from app.utils.file_utils import FileValidator, FileStorage
import uuid
import logging

settings = get_settings()
logger = logging.getLogger(__name__)

_upload_slots: Optional[asyncio.Semaphore] = None
_upload_slots_loop: Optional[asyncio.AbstractEventLoop] = None


def shared_upload_slots() -> asyncio.Semaphore:
    """
    Process-wide bound on concurrent image writes.

    Every ImageService draws from this one semaphore, so the limit holds across
    requests. A fresh semaphore is made when the running event loop changes.
    """
    global _upload_slots, _upload_slots_loop
    loop = asyncio.get_running_loop()
    if _upload_slots is None or _upload_slots_loop is not loop:
        _upload_slots = asyncio.Semaphore(settings.max_concurrent_uploads)
        _upload_slots_loop = loop
    return _upload_slots


class ImageService:
    """
    Stores uploaded images and records their URLs.

    A listing's image list is only ever changed through the repository's
    compare-and-set update, so two uploads racing on the same listing both land.
    """

    def __init__(
        self,
        db_session: AsyncSession,
        storage: Optional[FileStorage] = None,
        upload_slots: Optional[asyncio.Semaphore] = None
    ):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)
        self.user_repo = UserRepository(db_session)
        self.storage = storage or FileStorage()
        self._upload_slots = upload_slots

    @property
    def upload_slots(self) -> asyncio.Semaphore:
        if self._upload_slots is not None:
            return self._upload_slots
        return shared_upload_slots()

    async def _owned_property(self, property_id: uuid.UUID, current_user: User, action: str):
        property_obj = await self.property_repo.get_by_id(property_id)
        if not property_obj:
            raise NotFoundError("Property", str(property_id))
        if property_obj.owner_id != current_user.id:
            logger.warning(f"User {current_user.id} denied permission to {action} property {property_id}")
            raise InsufficientPermissionsError(f"{action} this property")
        return property_obj

    async def _store(self, key: str, content: bytes) -> str:
        async with self.upload_slots:
            return await self.storage.save(key, content)

    def _discard(self, urls: List[str]) -> None:
        for url in urls:
            self.storage.delete_url(url)

    async def upload_property_images(
        self,
        property_id: uuid.UUID,
        files: List[UploadFile],
        current_user: User
    ) -> Tuple[List[str], List[str]]:
        """
        Upload one or more photos to a listing.

        Every file is validated before anything is written. Files are then
        stored concurrently, at most `max_concurrent_uploads` at a time, and
        appended to the listing in one atomic update.

        Args:
            property_id: ID of the listing
            files: Uploaded image files
            current_user: Must own the listing

        Returns:
            Tuple of (full image list after the upload, URLs added by this upload)

        Raises:
            BadRequestError: No files, too many images, or an invalid file
            NotFoundError: If the listing doesn't exist
            InsufficientPermissionsError: If the caller doesn't own the listing
            ConflictError: If concurrent updates kept the append from landing
        """
        if not files:
            raise BadRequestError("No files provided")

        property_obj = await self._owned_property(property_id, current_user, "upload images to")

        max_images = settings.max_images_per_property
        if len(property_obj.images or []) + len(files) > max_images:
            raise ResourceLimitExceededError("Image", max_images)

        validated = [
            await FileValidator.read_upload(file, settings.max_image_size)
            for file in files
        ]

        folder = f"properties/{property_obj.owner_id}/{property_id}"
        results = await asyncio.gather(
            *(self._store(self.storage.generate_key(folder, ext), content) for content, ext in validated),
            return_exceptions=True
        )
        uploaded = [url for url in results if isinstance(url, str)]
        failures = [error for error in results if isinstance(error, BaseException)]
        if failures:
            self._discard(uploaded)
            raise failures[0]

        def append(images: List[str]) -> List[str]:
            if len(images) + len(uploaded) > max_images:
                raise ResourceLimitExceededError("Image", max_images)
            return images + uploaded

        try:
            images = await self.property_repo.update_images(property_id, append)
        except ConcurrentUpdateError as e:
            self._discard(uploaded)
            raise ConflictError(str(e))
        except Exception:
            self._discard(uploaded)
            raise

        if images is None:
            self._discard(uploaded)
            raise NotFoundError("Property", str(property_id))

        logger.info(f"Uploaded {len(uploaded)} image(s) to property {property_id} by {current_user.email}")
        return images, uploaded

    async def delete_property_image(self, property_id: uuid.UUID, image_url: str, current_user: User) -> List[str]:
        """
        Remove one photo from a listing and from storage.

        Returns:
            The image list after removal

        Raises:
            NotFoundError: If the listing doesn't exist
            InsufficientPermissionsError: If the caller doesn't own the listing
            ConflictError: If concurrent updates kept the removal from landing
        """
        await self._owned_property(property_id, current_user, "delete images from")

        removed = []

        def remove(images: List[str]) -> List[str]:
            removed[:] = [url for url in images if url == image_url]
            return [url for url in images if url != image_url]

        try:
            images = await self.property_repo.update_images(property_id, remove)
        except ConcurrentUpdateError as e:
            raise ConflictError(str(e))

        if images is None:
            raise NotFoundError("Property", str(property_id))

        if removed:
            # Only files that belonged to this listing are deleted
            self.storage.delete_url(image_url)
        logger.info(f"Removed image from property {property_id} by {current_user.email}")
        return images

    async def upload_avatar(self, file: Optional[UploadFile], current_user: User) -> User:
        """
        Replace the caller's avatar.

        Raises:
            BadRequestError: Missing file, wrong type, too large or not an image
        """
        if file is None:
            raise BadRequestError("No file provided")

        content, ext = await FileValidator.read_upload(file, settings.max_avatar_size)
        url = await self._store(self.storage.generate_key(f"avatars/{current_user.id}", ext), content)

        previous = current_user.avatar_url
        try:
            updated_user = await self.user_repo.update(current_user.id, {"avatar_url": url})
        except Exception:
            self.storage.delete_url(url)
            raise

        if previous and previous != url:
            self.storage.delete_url(previous)

        logger.info(f"Avatar updated for {current_user.email}")
        return updated_user
