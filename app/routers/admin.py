"""
Admin dashboard endpoints. Every route requires the admin role.
"""

from fastapi import APIRouter, Depends, Query, Path
from uuid import UUID

from app.config import settings
from app.models.user import User
from app.services.admin import AdminService
from app.schemas.admin import AdminStats, AdminListing, AdminListingPage, AdminUserList
from app.schemas.user import RoleUpdate, UserResponse
from app.schemas.error import get_error_responses
from app.utils.dependencies import get_current_admin_user, get_admin_service
from app.utils.pagination import total_pages


router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get(
    "/stats",
    response_model=AdminStats,
    summary="Platform statistics",
    responses=get_error_responses(401, 403)
)
async def get_stats(
    current_user: User = Depends(get_current_admin_user),
    admin_service: AdminService = Depends(get_admin_service)
) -> AdminStats:
    return AdminStats(**await admin_service.get_stats())


@router.get(
    "/listings",
    response_model=AdminListingPage,
    summary="All listings",
    description="Every listing in any status with its owner's name, newest first",
    responses=get_error_responses(401, 403, 422)
)
async def list_listings(
    page: int = Query(1, description="Page number"),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user: User = Depends(get_current_admin_user),
    admin_service: AdminService = Depends(get_admin_service)
) -> AdminListingPage:
    page = page if page >= 1 else 1
    properties, total = await admin_service.list_listings(page, limit)
    return AdminListingPage(
        data=[
            AdminListing.model_validate(p) for p in properties
        ],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit)
    )


@router.get(
    "/users",
    response_model=AdminUserList,
    summary="All users",
    responses=get_error_responses(401, 403)
)
async def list_users(
    current_user: User = Depends(get_current_admin_user),
    admin_service: AdminService = Depends(get_admin_service)
) -> AdminUserList:
    users = await admin_service.list_users()
    return AdminUserList(data=[UserResponse.model_validate(u) for u in users], total=len(users))


@router.patch(
    "/users/{user_id}/role",
    response_model=UserResponse,
    summary="Change a user's role",
    responses=get_error_responses(400, 401, 403, 404, 422)
)
async def update_user_role(
    role_update: RoleUpdate,
    user_id: UUID = Path(..., description="User ID"),
    current_user: User = Depends(get_current_admin_user),
    admin_service: AdminService = Depends(get_admin_service)
) -> UserResponse:
    user = await admin_service.update_user_role(user_id, role_update.role, current_user)
    return UserResponse.model_validate(user)
