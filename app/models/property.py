"""
Property model for sale and rental listings.
Holds pricing, location, physical details, amenity tags and the ordered image list.
"""

from sqlalchemy import (
    String, Text, Integer, Float, Numeric, JSON, Enum as SQLEnum, Index, ForeignKey, Uuid
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
from decimal import Decimal
import enum
import uuid
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.user import User


class PropertyType(str, enum.Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    LAND = "land"
    COMMERCIAL = "commercial"


class ListingType(str, enum.Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyStatus(str, enum.Enum):
    """Listing lifecycle status. Only ACTIVE listings are publicly searchable."""
    DRAFT = "draft"
    ACTIVE = "active"
    UNDER_CONTRACT = "under_contract"
    SOLD = "sold"
    RENTED = "rented"


AMENITIES = [
    "Pool", "Gym", "Garage", "Garden", "Air Conditioning", "Laundry", "Dishwasher",
    "Fireplace", "Balcony", "Elevator", "Security System", "Hardwood Floors",
    "Walk-in Closet", "Pet Friendly", "Furnished", "Waterfront", "Mountain View",
    "City View", "Smart Home", "Solar Panels",
]


def _values(enum_cls):
    return [member.value for member in enum_cls]


class Property(Base):
    """
    Property listing owned by a single user.
    `images_version` is bumped on every change to `images` and guards
    concurrent appends and removals.
    """

    __tablename__ = "properties"

    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this listing"
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False, comment="Listing title")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    property_type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType, name="property_type", values_callable=_values),
        nullable=False,
        index=True
    )
    listing_type: Mapped[ListingType] = mapped_column(
        SQLEnum(ListingType, name="listing_type", values_callable=_values),
        nullable=False,
        index=True
    )
    status: Mapped[PropertyStatus] = mapped_column(
        SQLEnum(PropertyStatus, name="property_status", values_callable=_values),
        nullable=False,
        default=PropertyStatus.DRAFT,
        index=True
    )

    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        index=True,
        comment="Sale price, or monthly rent for rentals"
    )
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")

    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(120), nullable=False)
    zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    country: Mapped[str] = mapped_column(String(2), nullable=False, default="US")
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    bedrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=3, scale=1), nullable=True)
    sqft: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    lot_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    year_built: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    parking_spaces: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    amenities: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    images: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered image URLs; the first one is the cover"
    )
    images_version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    owner: Mapped["User"] = relationship("User", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title[:30]}, price={self.price})>"

    @property
    def owner_name(self) -> Optional[str]:
        return self.owner.full_name if self.owner else None


# Search indexes for the common public query shapes
status_created_index = Index(
    "idx_properties_status_created",
    Property.status,
    Property.created_at.desc()
)

status_price_index = Index(
    "idx_properties_status_price",
    Property.status,
    Property.price
)

coordinates_index = Index(
    "idx_properties_coordinates",
    Property.latitude,
    Property.longitude,
    postgresql_where=Property.latitude.isnot(None) & Property.longitude.isnot(None)
)
