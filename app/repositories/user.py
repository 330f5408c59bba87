"""
User repository for authentication and profile management operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.repositories.base import BaseRepository
from app.models.user import User, UserRole
from typing import Optional, Dict, Any, List
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Profiles, looked up by id or email."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user with email validation and password hashing.

        Args:
            user_data: Must include email, password and full_name; role is optional
                       and defaults to BUYER

        Returns:
            Created user instance

        Raises:
            ValueError: If the email is invalid or taken, or the password too short
        """
        data = dict(user_data)
        password = data.pop("password")
        email = User.validate_email_format(data.pop("email"))

        if await self.get_by_email(email):
            raise ValueError(f"User with email {email} already exists")

        create_data = {
            **data,
            "email": email,
            "hashed_password": User.hash_password(password),
            "role": data.get("role", UserRole.BUYER),
        }

        created_user = await self.create(create_data)
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        """Every profile, newest first."""
        result = await self.db.execute(select(User).order_by(User.created_at.desc(), User.id))
        return list(result.scalars().all())
