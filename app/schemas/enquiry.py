"""
Pydantic schemas for enquiries sent to listing owners.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime, date
from app.models.enquiry import EnquiryStatus
from app.schemas.user import SenderSummary
import uuid


class EnquiryCreate(BaseModel):
    """Schema for sending an enquiry about a listing."""

    property_id: uuid.UUID = Field(..., description="Listing the enquiry is about")
    message: str = Field(..., min_length=1, max_length=5000, examples=["Is the unit still available next month?"])
    phone: Optional[str] = Field(None, max_length=50)
    preferred_date: Optional[date] = Field(None, description="Preferred viewing date")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v):
        if not v.strip():
            raise ValueError("Message cannot be empty")
        return v.strip()


class EnquiryStatusUpdate(BaseModel):
    status: EnquiryStatus


class EnquiryPropertySummary(BaseModel):
    model_config = {"from_attributes": True}

    id: uuid.UUID
    title: str
    images: List[str] = Field(default_factory=list)


class EnquiryResponse(BaseModel):
    """Enquiry with the listing and sender embedded."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    property_id: uuid.UUID
    sender_id: uuid.UUID
    owner_id: uuid.UUID
    message: str
    phone: Optional[str] = None
    preferred_date: Optional[date] = None
    status: EnquiryStatus
    created_at: datetime
    updated_at: datetime
    property: Optional[EnquiryPropertySummary] = None
    sender: Optional[SenderSummary] = None


class EnquiryListResponse(BaseModel):
    data: List[EnquiryResponse]
    total: int
