"""
Enquiry endpoints: send, list by role and update status.
"""

from fastapi import APIRouter, Depends, status, Path
from uuid import UUID

from app.models.user import User
from app.services.enquiry import EnquiryService
from app.schemas.enquiry import EnquiryCreate, EnquiryStatusUpdate, EnquiryResponse, EnquiryListResponse
from app.schemas.error import get_crud_error_responses, get_error_responses
from app.utils.dependencies import get_current_active_user, get_enquiry_service


router = APIRouter(prefix="/enquiries", tags=["Enquiries"])


@router.get(
    "",
    response_model=EnquiryListResponse,
    summary="List enquiries",
    description="Owners see enquiries on their listings, buyers see what they sent, admins see all",
    responses=get_error_responses(401, 403)
)
async def list_enquiries(
    current_user: User = Depends(get_current_active_user),
    enquiry_service: EnquiryService = Depends(get_enquiry_service)
) -> EnquiryListResponse:
    enquiries = await enquiry_service.list_enquiries(current_user)
    return EnquiryListResponse(
        data=[EnquiryResponse.model_validate(e) for e in enquiries],
        total=len(enquiries)
    )


@router.post(
    "",
    response_model=EnquiryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send an enquiry",
    description="Contact a listing owner. The owner is notified by email when mail is configured.",
    responses=get_crud_error_responses()
)
async def create_enquiry(
    enquiry_data: EnquiryCreate,
    current_user: User = Depends(get_current_active_user),
    enquiry_service: EnquiryService = Depends(get_enquiry_service)
) -> EnquiryResponse:
    """
    Send an enquiry.

    Raises:
        NotFoundError: If the listing doesn't exist
        BadRequestError: If the caller owns the listing
    """
    enquiry = await enquiry_service.create_enquiry(enquiry_data, current_user)
    return EnquiryResponse.model_validate(enquiry)


@router.patch(
    "/{enquiry_id}",
    response_model=EnquiryResponse,
    summary="Update enquiry status",
    description="unread -> read -> replied -> archived; only the listing owner or an admin",
    responses=get_crud_error_responses()
)
async def update_enquiry_status(
    status_update: EnquiryStatusUpdate,
    enquiry_id: UUID = Path(..., description="Enquiry ID"),
    current_user: User = Depends(get_current_active_user),
    enquiry_service: EnquiryService = Depends(get_enquiry_service)
) -> EnquiryResponse:
    enquiry = await enquiry_service.update_status(enquiry_id, status_update.status, current_user)
    return EnquiryResponse.model_validate(enquiry)
