"""
Pydantic schemas for user profiles.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from app.models.user import UserRole
import uuid


class UserRegister(BaseModel):
    """Signup payload. Admin accounts cannot be self-registered."""

    email: EmailStr = Field(..., description="User's email address", examples=["owner@example.com"])
    password: str = Field(..., min_length=8, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = Field(UserRole.BUYER, description="buyer or owner")
    phone: Optional[str] = Field(None, max_length=50)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip()

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v):
        if not v.strip():
            raise ValueError("Full name cannot be empty")
        return v.strip()

    @field_validator("role")
    @classmethod
    def validate_role(cls, v):
        if v == UserRole.ADMIN:
            raise ValueError("Role must be buyer or owner")
        return v


class UserResponse(BaseModel):
    """Full profile, returned to the user themselves and to admins."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    email: str
    full_name: str
    role: UserRole
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class OwnerSummary(BaseModel):
    """Public slice of a listing owner's profile."""

    model_config = {"from_attributes": True, "populate_by_name": True}

    user_id: uuid.UUID = Field(..., validation_alias="id")
    full_name: str
    avatar_url: Optional[str] = None
    phone: Optional[str] = None


class OwnerProfile(OwnerSummary):
    bio: Optional[str] = None


class SenderSummary(BaseModel):
    model_config = {"from_attributes": True}

    full_name: str
    avatar_url: Optional[str] = None


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    bio: Optional[str] = Field(None, max_length=2000)


class RoleUpdate(BaseModel):
    role: UserRole
