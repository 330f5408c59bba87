"""
Database models for the NestFind API.
Includes User, Property, Enquiry and SavedProperty models.
"""

from app.models.user import User, UserRole
from app.models.property import Property, PropertyType, ListingType, PropertyStatus, AMENITIES
from app.models.enquiry import Enquiry, EnquiryStatus, ENQUIRY_TRANSITIONS
from app.models.saved_property import SavedProperty

__all__ = [
    "User",
    "UserRole",
    "Property",
    "PropertyType",
    "ListingType",
    "PropertyStatus",
    "AMENITIES",
    "Enquiry",
    "EnquiryStatus",
    "ENQUIRY_TRANSITIONS",
    "SavedProperty",
]
