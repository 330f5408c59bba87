"""
Pydantic schemas for request/response validation.
"""

# Authentication schemas
from .auth import (
    LoginRequest,
    TokenResponse,
    LoginResponse,
    RefreshTokenRequest,
    AccessTokenResponse,
)

# User schemas
from .user import (
    UserRegister,
    UserResponse,
    OwnerSummary,
    OwnerProfile,
    SenderSummary,
    ProfileUpdate,
    RoleUpdate,
)

# Property schemas
from .property import (
    SortOption,
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse,
    PropertyDetailResponse,
    PropertyListResponse,
    PropertyCollectionResponse,
    BoundingBox,
    PropertySearchParams,
    MapSearchParams,
    ImageDeleteRequest,
    ImageUploadResponse,
    ImageListResponse,
    AmenitiesResponse,
)

# Enquiry schemas
from .enquiry import (
    EnquiryCreate,
    EnquiryStatusUpdate,
    EnquiryResponse,
    EnquiryListResponse,
)

# Saved property schemas
from .saved import (
    SavePropertyRequest,
    SavedPropertyResponse,
    SavedPropertyListResponse,
)

from .seed import SeedResponse, SeededProperty
from .admin import AdminStats, AdminListing, AdminListingPage, AdminUserList

__all__ = [
    # Authentication
    "LoginRequest",
    "TokenResponse",
    "LoginResponse",
    "RefreshTokenRequest",
    "AccessTokenResponse",

    # User
    "UserRegister",
    "UserResponse",
    "OwnerSummary",
    "OwnerProfile",
    "SenderSummary",
    "ProfileUpdate",
    "RoleUpdate",

    # Property
    "SortOption",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",
    "PropertyDetailResponse",
    "PropertyListResponse",
    "PropertyCollectionResponse",
    "BoundingBox",
    "PropertySearchParams",
    "MapSearchParams",
    "ImageDeleteRequest",
    "ImageUploadResponse",
    "ImageListResponse",
    "AmenitiesResponse",

    # Enquiry
    "EnquiryCreate",
    "EnquiryStatusUpdate",
    "EnquiryResponse",
    "EnquiryListResponse",

    # Saved
    "SavePropertyRequest",
    "SavedPropertyResponse",
    "SavedPropertyListResponse",

    # Seed / admin
    "SeedResponse",
    "SeededProperty",
    "AdminStats",
    "AdminListing",
    "AdminListingPage",
    "AdminUserList",
]
