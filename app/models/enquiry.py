"""
Enquiry model for messages sent by buyers to listing owners.
"""

from sqlalchemy import String, Text, Date, Enum as SQLEnum, ForeignKey, Uuid, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
from datetime import date
import enum
import uuid
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.property import Property


class EnquiryStatus(str, enum.Enum):
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


# Statuses reachable from each status; re-applying the current one is a no-op
ENQUIRY_TRANSITIONS = {
    EnquiryStatus.UNREAD: {EnquiryStatus.READ, EnquiryStatus.REPLIED, EnquiryStatus.ARCHIVED},
    EnquiryStatus.READ: {EnquiryStatus.REPLIED, EnquiryStatus.ARCHIVED},
    EnquiryStatus.REPLIED: {EnquiryStatus.ARCHIVED},
    EnquiryStatus.ARCHIVED: set(),
}


class Enquiry(Base):
    """
    Message from a sender about one property.
    `owner_id` is copied from the property when the enquiry is created.
    """

    __tablename__ = "enquiries"

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    sender_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    message: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    preferred_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    status: Mapped[EnquiryStatus] = mapped_column(
        SQLEnum(EnquiryStatus, name="enquiry_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=EnquiryStatus.UNREAD
    )

    property: Mapped["Property"] = relationship("Property", lazy="selectin")
    sender: Mapped["User"] = relationship("User", foreign_keys=[sender_id], lazy="selectin")

    def can_transition_to(self, target: EnquiryStatus) -> bool:
        return target == self.status or target in ENQUIRY_TRANSITIONS[self.status]


owner_created_index = Index("idx_enquiries_owner_created", Enquiry.owner_id, Enquiry.created_at.desc())
sender_created_index = Index("idx_enquiries_sender_created", Enquiry.sender_id, Enquiry.created_at.desc())
