"""
Pydantic schemas for property requests and responses.
Handles listing CRUD payloads, search parameters and the paged/flat result shapes.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from enum import Enum
from app.models.property import PropertyType, ListingType, PropertyStatus
from app.schemas.user import OwnerSummary, OwnerProfile
from app.utils.pagination import clamp_page
import uuid


class SortOption(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


class PropertyCreate(BaseModel):
    """Schema for creating a new listing."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Charming Victorian in The Glebe"])
    description: Optional[str] = Field(None, max_length=10000)
    property_type: PropertyType
    listing_type: ListingType
    status: PropertyStatus = PropertyStatus.DRAFT
    price: Decimal = Field(..., ge=0, le=Decimal("9999999999.99"), description="Sale price or monthly rent")
    currency: str = Field("USD", min_length=3, max_length=3)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=120)
    state: str = Field(..., min_length=1, max_length=120)
    zip_code: Optional[str] = Field(None, max_length=20)
    country: str = Field("US", min_length=2, max_length=2)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    bedrooms: Optional[int] = Field(None, ge=0, le=100)
    bathrooms: Optional[float] = Field(None, ge=0, le=100, multiple_of=0.5)
    sqft: Optional[int] = Field(None, ge=0)
    lot_size: Optional[int] = Field(None, ge=0)
    year_built: Optional[int] = Field(None, ge=1600, le=2100)
    parking_spaces: Optional[int] = Field(None, ge=0)
    amenities: List[str] = Field(default_factory=list)

    @field_validator("title", "address", "city", "state")
    @classmethod
    def strip_required_text(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("amenities")
    @classmethod
    def dedupe_amenities(cls, v):
        return list(dict.fromkeys(tag.strip() for tag in v if tag.strip()))


# Columns that cannot be NULL; an explicit null for these is rejected on update
NON_NULLABLE_UPDATE_FIELDS = (
    "title", "property_type", "listing_type", "status", "price",
    "address", "city", "state", "amenities", "images",
)


class PropertyUpdate(BaseModel):
    """
    Partial update. Only these fields can be written through PATCH;
    anything else in the body is ignored.
    """

    model_config = {"extra": "ignore"}

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=10000)
    property_type: Optional[PropertyType] = None
    listing_type: Optional[ListingType] = None
    status: Optional[PropertyStatus] = None
    price: Optional[Decimal] = Field(None, ge=0, le=Decimal("9999999999.99"))
    address: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=120)
    state: Optional[str] = Field(None, min_length=1, max_length=120)
    zip_code: Optional[str] = Field(None, max_length=20)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    bedrooms: Optional[int] = Field(None, ge=0, le=100)
    bathrooms: Optional[float] = Field(None, ge=0, le=100, multiple_of=0.5)
    sqft: Optional[int] = Field(None, ge=0)
    lot_size: Optional[int] = Field(None, ge=0)
    year_built: Optional[int] = Field(None, ge=1600, le=2100)
    parking_spaces: Optional[int] = Field(None, ge=0)
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = Field(None, max_length=10)

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in NON_NULLABLE_UPDATE_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class PropertyResponse(BaseModel):
    """Listing as returned by search, map and detail endpoints."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    owner_id: uuid.UUID
    title: str
    description: Optional[str] = None
    property_type: PropertyType
    listing_type: ListingType
    status: PropertyStatus
    price: float
    currency: str
    address: str
    city: str
    state: str
    zip_code: Optional[str] = None
    country: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    sqft: Optional[int] = None
    lot_size: Optional[int] = None
    year_built: Optional[int] = None
    parking_spaces: Optional[int] = None
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    owner: Optional[OwnerSummary] = None


class PropertyDetailResponse(PropertyResponse):
    owner: Optional[OwnerProfile] = None


class PropertyListResponse(BaseModel):
    """One page of listings."""

    model_config = {"populate_by_name": True}

    data: List[PropertyResponse]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")


class PropertyCollectionResponse(BaseModel):
    """Flat, unpaged result used by featured and map queries."""

    data: List[PropertyResponse]
    total: int


class BoundingBox(BaseModel):
    """Map viewport in degrees. No antimeridian wrap: west must not exceed east."""

    north: float
    south: float
    east: float
    west: float


class PropertySearchParams(BaseModel):
    """Validated listing search criteria."""

    query: Optional[str] = Field(None, max_length=200)
    listing_type: Optional[ListingType] = None
    property_type: Optional[PropertyType] = None
    min_price: Optional[Decimal] = Field(None, ge=0)
    max_price: Optional[Decimal] = Field(None, ge=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    min_sqft: Optional[int] = Field(None, ge=0)
    max_sqft: Optional[int] = Field(None, ge=0)
    city: Optional[str] = Field(None, max_length=120)
    state: Optional[str] = Field(None, max_length=120)
    amenities: List[str] = Field(default_factory=list)
    north: Optional[float] = Field(None, ge=-90, le=90)
    south: Optional[float] = Field(None, ge=-90, le=90)
    east: Optional[float] = Field(None, ge=-180, le=180)
    west: Optional[float] = Field(None, ge=-180, le=180)
    sort: SortOption = SortOption.NEWEST
    page: int = 1
    limit: int = Field(12, ge=1, le=100)
    featured: Optional[int] = Field(None, ge=1, le=100)

    @field_validator("query", "city", "state")
    @classmethod
    def blank_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("page")
    @classmethod
    def first_page_at_least(cls, v):
        return clamp_page(v)

    @model_validator(mode="after")
    def validate_ranges(self):
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValueError("min_price must not be greater than max_price")
        if self.min_sqft is not None and self.max_sqft is not None and self.min_sqft > self.max_sqft:
            raise ValueError("min_sqft must not be greater than max_sqft")
        return self

    @model_validator(mode="after")
    def validate_bounds(self):
        """All four edges or none; a partial box is a validation error."""
        edges = (self.north, self.south, self.east, self.west)
        if all(edge is None for edge in edges):
            return self
        if any(edge is None for edge in edges):
            raise ValueError("Bounds require all of north, south, east and west")
        if self.south > self.north:
            raise ValueError("south must not be greater than north")
        if self.west > self.east:
            raise ValueError("west must not be greater than east")
        return self

    @property
    def bounds(self) -> Optional[BoundingBox]:
        if self.north is None:
            return None
        return BoundingBox(north=self.north, south=self.south, east=self.east, west=self.west)


class MapSearchParams(PropertySearchParams):
    """Search criteria for the map; a complete viewport is mandatory."""

    @model_validator(mode="after")
    def require_bounds(self):
        if self.north is None:
            raise ValueError("Map search requires north, south, east and west")
        return self


class ImageDeleteRequest(BaseModel):
    image_url: str = Field(..., alias="imageUrl", min_length=1)

    model_config = {"populate_by_name": True}


class ImageUploadResponse(BaseModel):
    images: List[str]
    uploaded: List[str]


class AmenitiesResponse(BaseModel):
    amenities: List[str]


class ImageListResponse(BaseModel):
    images: List[str]
