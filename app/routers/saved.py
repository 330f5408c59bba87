"""
Saved property endpoints.
"""

from fastapi import APIRouter, Depends, status, Path, Response
from uuid import UUID

from app.models.user import User
from app.services.saved import SavedPropertyService
from app.schemas.saved import SavePropertyRequest, SavedPropertyResponse, SavedPropertyListResponse
from app.schemas.error import get_error_responses
from app.utils.dependencies import get_current_active_user, get_saved_service


router = APIRouter(prefix="/saved", tags=["Saved"])


@router.get(
    "",
    response_model=SavedPropertyListResponse,
    summary="List my saved properties",
    responses=get_error_responses(401)
)
async def list_saved(
    current_user: User = Depends(get_current_active_user),
    saved_service: SavedPropertyService = Depends(get_saved_service)
) -> SavedPropertyListResponse:
    saved = await saved_service.list_saved(current_user)
    return SavedPropertyListResponse(
        data=[SavedPropertyResponse.model_validate(s) for s in saved],
        total=len(saved)
    )


@router.post(
    "",
    response_model=SavedPropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a property",
    responses=get_error_responses(401, 404, 409, 422)
)
async def save_property(
    request: SavePropertyRequest,
    current_user: User = Depends(get_current_active_user),
    saved_service: SavedPropertyService = Depends(get_saved_service)
) -> SavedPropertyResponse:
    saved = await saved_service.save_property(request.property_id, current_user)
    return SavedPropertyResponse.model_validate(saved)


@router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unsave a property",
    description="Succeeds whether or not the property was saved",
    responses=get_error_responses(401, 422)
)
async def unsave_property(
    property_id: UUID = Path(..., description="Property ID"),
    current_user: User = Depends(get_current_active_user),
    saved_service: SavedPropertyService = Depends(get_saved_service)
) -> Response:
    await saved_service.unsave_property(property_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
