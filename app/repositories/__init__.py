"""
Repository layer for data access operations.
"""

from app.repositories.base import BaseRepository
from app.repositories.property import (
    PropertyRepository, PropertySearchFilters, PROPERTY_SCOPE, SORT_ORDERS, ConcurrentUpdateError
)
from app.repositories.user import UserRepository
from app.repositories.enquiry import EnquiryRepository, ENQUIRY_SCOPE
from app.repositories.saved_property import SavedPropertyRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "PropertySearchFilters",
    "PROPERTY_SCOPE",
    "SORT_ORDERS",
    "ConcurrentUpdateError",
    "UserRepository",
    "EnquiryRepository",
    "ENQUIRY_SCOPE",
    "SavedPropertyRepository",
]
