"""
Pydantic schemas for saved (bookmarked) listings.
"""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from app.schemas.property import PropertyResponse
import uuid


class SavePropertyRequest(BaseModel):
    property_id: uuid.UUID = Field(..., description="Listing to bookmark")


class SavedPropertyResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: uuid.UUID
    property_id: uuid.UUID
    created_at: datetime
    property: PropertyResponse


class SavedPropertyListResponse(BaseModel):
    data: List[SavedPropertyResponse]
    total: int
