"""
Listing photo endpoints: multipart upload and removal by URL.
"""

from fastapi import APIRouter, Depends, status, File, UploadFile, Path
from typing import List, Optional
from uuid import UUID

from app.models.user import User
from app.services.image import ImageService
from app.schemas.property import ImageDeleteRequest, ImageUploadResponse, ImageListResponse
from app.schemas.error import get_crud_error_responses
from app.utils.dependencies import get_current_active_user, get_image_service


router = APIRouter(prefix="/properties", tags=["Images"])


@router.post(
    "/{property_id}/images",
    response_model=ImageUploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload property images",
    description=(
        "Upload one or more JPEG, PNG or WebP images (max 5MB each, 10 per listing). "
        "Only the listing owner can upload."
    ),
    responses=get_crud_error_responses()
)
async def upload_property_images(
    property_id: UUID = Path(..., description="Property ID"),
    files: Optional[List[UploadFile]] = File(None, description="Image files"),
    current_user: User = Depends(get_current_active_user),
    image_service: ImageService = Depends(get_image_service)
) -> ImageUploadResponse:
    """
    Upload images to a listing.

    Returns:
        The listing's full image list and the URLs added by this request

    Raises:
        BadRequestError: No files, limit exceeded or an invalid image
        InsufficientPermissionsError: If the caller doesn't own the listing
        NotFoundError: If the listing doesn't exist
    """
    images, uploaded = await image_service.upload_property_images(property_id, files or [], current_user)
    return ImageUploadResponse(images=images, uploaded=uploaded)


@router.delete(
    "/{property_id}/images",
    response_model=ImageListResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a property image",
    description="Remove an image URL from the listing and delete the stored file",
    responses=get_crud_error_responses()
)
async def delete_property_image(
    body: ImageDeleteRequest,
    property_id: UUID = Path(..., description="Property ID"),
    current_user: User = Depends(get_current_active_user),
    image_service: ImageService = Depends(get_image_service)
) -> ImageListResponse:
    images = await image_service.delete_property_image(property_id, body.image_url, current_user)
    return ImageListResponse(images=images)
