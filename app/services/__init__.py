"""
Service layer for business logic implementation.
Contains services for authentication, listings, enquiries, images and error handling.
"""

from .auth import AuthService
from .property import PropertyService
from .enquiry import EnquiryService
from .saved import SavedPropertyService
from .image import ImageService
from .notification import NotificationService
from .admin import AdminService
from .seed import SeedService
from .error_handler import ErrorHandlerService

__all__ = [
    "AuthService",
    "PropertyService",
    "EnquiryService",
    "SavedPropertyService",
    "ImageService",
    "NotificationService",
    "AdminService",
    "SeedService",
    "ErrorHandlerService"
]
