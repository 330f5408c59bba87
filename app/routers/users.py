"""
Profile endpoints for the signed-in user.
"""

from fastapi import APIRouter, Depends, status, File, UploadFile
from typing import Optional

from app.models.user import User
from app.services.auth import AuthService
from app.services.image import ImageService
from app.schemas.user import ProfileUpdate, UserResponse
from app.schemas.error import get_error_responses
from app.utils.dependencies import get_current_active_user, get_auth_service, get_image_service


router = APIRouter(prefix="/users", tags=["Users"])


@router.patch(
    "/me",
    response_model=UserResponse,
    summary="Update my profile",
    responses=get_error_responses(400, 401, 422)
)
async def update_my_profile(
    profile_data: ProfileUpdate,
    current_user: User = Depends(get_current_active_user),
    auth_service: AuthService = Depends(get_auth_service)
) -> UserResponse:
    user = await auth_service.update_profile(current_user, profile_data)
    return UserResponse.model_validate(user)


@router.post(
    "/me/avatar",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Upload my avatar",
    description="JPEG, PNG or WebP up to 2MB",
    responses=get_error_responses(400, 401, 422)
)
async def upload_my_avatar(
    file: Optional[UploadFile] = File(None, description="Avatar image"),
    current_user: User = Depends(get_current_active_user),
    image_service: ImageService = Depends(get_image_service)
) -> UserResponse:
    user = await image_service.upload_avatar(file, current_user)
    return UserResponse.model_validate(user)
