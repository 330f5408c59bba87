"""
Enquiry service: buyers contact owners about a listing, owners track status.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.enquiry import EnquiryRepository
from app.repositories.property import PropertyRepository
from app.repositories.user import UserRepository
from app.models.enquiry import Enquiry, EnquiryStatus
from app.models.user import User
from app.schemas.enquiry import EnquiryCreate
from app.services.notification import NotificationService
from app.utils.exceptions import (
    NotFoundError,
    BadRequestError,
    InsufficientPermissionsError,
    InvalidStatusTransitionError,
)
import uuid
import logging

logger = logging.getLogger(__name__)


class EnquiryService:
    """Creates, lists and moves enquiries through their status lifecycle."""

    def __init__(self, db_session: AsyncSession, notifier: Optional[NotificationService] = None):
        self.db = db_session
        self.enquiry_repo = EnquiryRepository(db_session)
        self.property_repo = PropertyRepository(db_session)
        self.user_repo = UserRepository(db_session)
        self.notifier = notifier or NotificationService()

    async def create_enquiry(self, enquiry_data: EnquiryCreate, sender: User) -> Enquiry:
        """
        Send an enquiry to the owner of a listing.

        Args:
            enquiry_data: Listing id, message and optional contact details
            sender: Authenticated user sending the enquiry

        Returns:
            Created enquiry with status unread

        Raises:
            NotFoundError: If the listing doesn't exist
            BadRequestError: If the sender owns the listing
        """
        property_obj = await self.property_repo.get_by_id(enquiry_data.property_id)
        if not property_obj:
            raise NotFoundError("Property", str(enquiry_data.property_id))

        if property_obj.owner_id == sender.id:
            logger.warning(f"User {sender.id} tried to enquire about own property {property_obj.id}")
            raise BadRequestError("Cannot enquire about your own property")

        enquiry = await self.enquiry_repo.create({
            **enquiry_data.model_dump(),
            "sender_id": sender.id,
            "owner_id": property_obj.owner_id,
            "status": EnquiryStatus.UNREAD,
        })
        logger.info(f"Enquiry {enquiry.id} sent by {sender.email} for property {property_obj.id}")

        owner = property_obj.owner or await self.user_repo.get_by_id(property_obj.owner_id)
        if owner is not None:
            await self.notifier.notify_enquiry(enquiry, property_obj, owner, sender)

        return await self.enquiry_repo.get_by_id(enquiry.id)

    async def list_enquiries(self, current_user: User) -> List[Enquiry]:
        """Enquiries visible to the caller's role, newest first."""
        return await self.enquiry_repo.list_for_viewer(current_user.role, current_user.id)

    async def update_status(self, enquiry_id: uuid.UUID, new_status: EnquiryStatus, current_user: User) -> Enquiry:
        """
        Move an enquiry to a new status.

        Only the listing owner or an admin may change the status. Setting the
        current status again is accepted and changes nothing.

        Raises:
            NotFoundError: If the enquiry doesn't exist
            InsufficientPermissionsError: If the caller doesn't own the listing
            InvalidStatusTransitionError: If the lifecycle forbids the move
        """
        enquiry = await self.enquiry_repo.get_by_id(enquiry_id)
        if not enquiry:
            raise NotFoundError("Enquiry", str(enquiry_id))

        if not current_user.can_manage_property(enquiry.owner_id):
            raise InsufficientPermissionsError("update this enquiry")

        if not enquiry.can_transition_to(new_status):
            logger.warning(f"Rejected enquiry {enquiry_id} transition {enquiry.status.value} -> {new_status.value}")
            raise InvalidStatusTransitionError(enquiry.status.value, new_status.value)

        if new_status == enquiry.status:
            return enquiry

        updated = await self.enquiry_repo.update(enquiry_id, {"status": new_status})
        if not updated:
            raise NotFoundError("Enquiry", str(enquiry_id))

        logger.info(f"Enquiry {enquiry_id} marked {new_status.value} by {current_user.email}")
        return updated
