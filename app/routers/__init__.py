"""
API route handlers for the NestFind API.
Provides organized routing for different API endpoints.
"""

from .auth import router as auth_router
from .users import router as users_router
from .properties import router as properties_router
from .images import router as images_router
from .enquiries import router as enquiries_router
from .saved import router as saved_router
from .seed import router as seed_router
from .admin import router as admin_router

__all__ = [
    "auth_router",
    "users_router",
    "properties_router",
    "images_router",
    "enquiries_router",
    "saved_router",
    "seed_router",
    "admin_router",
]
