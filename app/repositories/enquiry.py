"""
Enquiry repository with role-scoped listing.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.sql.elements import ColumnElement
from app.repositories.base import BaseRepository
from app.models.enquiry import Enquiry
from app.models.user import UserRole
from typing import Callable, Dict, List, Optional
import uuid
import logging

logger = logging.getLogger(__name__)

# Enquiries a viewer can list, by role. None means no restriction.
ENQUIRY_SCOPE: Dict[UserRole, Callable[[uuid.UUID], Optional[ColumnElement]]] = {
    UserRole.OWNER: lambda viewer_id: Enquiry.owner_id == viewer_id,
    UserRole.BUYER: lambda viewer_id: Enquiry.sender_id == viewer_id,
    UserRole.ADMIN: lambda viewer_id: None,
}


class EnquiryRepository(BaseRepository[Enquiry]):

    def __init__(self, db: AsyncSession):
        super().__init__(Enquiry, db)

    async def list_for_viewer(self, role: UserRole, viewer_id: uuid.UUID) -> List[Enquiry]:
        """
        Enquiries visible to a viewer, newest first.

        Args:
            role: Viewer's role, selects the predicate from ENQUIRY_SCOPE
            viewer_id: Viewer's user id

        Returns:
            Enquiries with property and sender loaded
        """
        query = select(Enquiry)
        condition = ENQUIRY_SCOPE[role](viewer_id)
        if condition is not None:
            query = query.where(condition)
        query = query.order_by(Enquiry.created_at.desc(), Enquiry.id.asc())

        result = await self.db.execute(query)
        enquiries = list(result.scalars().all())
        logger.debug(f"Listed {len(enquiries)} enquiries for {role.value} {viewer_id}")
        return enquiries
