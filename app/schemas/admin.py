"""
Pydantic schemas for the admin dashboard.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from app.models.property import PropertyType, ListingType, PropertyStatus
from app.schemas.user import UserResponse
import uuid


class AdminStats(BaseModel):
    """Headline counts for the dashboard."""

    model_config = {"populate_by_name": True}

    total_users: int = Field(..., alias="totalUsers")
    total_listings: int = Field(..., alias="totalListings")
    active_listings: int = Field(..., alias="activeListings")
    total_enquiries: int = Field(..., alias="totalEnquiries")


class AdminListing(BaseModel):
    model_config = {"from_attributes": True}

    id: uuid.UUID
    title: str
    property_type: PropertyType
    listing_type: ListingType
    status: PropertyStatus
    price: Decimal
    city: str
    state: str
    owner_id: uuid.UUID
    owner_name: Optional[str] = None
    created_at: datetime


class AdminListingPage(BaseModel):
    model_config = {"populate_by_name": True}

    data: List[AdminListing]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")


class AdminUserList(BaseModel):
    data: List[UserResponse]
    total: int
