"""
Authentication service for registration, login, token management and profiles.
Handles JWT token generation and validation for the current-user lookup.
"""

from typing import Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserRegister, ProfileUpdate
from app.utils.auth import (
    create_access_token,
    create_refresh_token,
    verify_token,
    ExpiredSignatureError,
    JWTError,
)
from app.utils.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    InactiveUserError,
    NotFoundError,
    BadRequestError,
    DuplicateResourceError,
)
import uuid
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service for managing accounts and tokens.
    Handles signup, login and refresh flows and the current-user lookup.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.user_repo = UserRepository(db_session)

    async def register(self, user_data: UserRegister) -> User:
        """
        Create a buyer or owner account.

        Args:
            user_data: Validated signup payload

        Returns:
            Created User

        Raises:
            DuplicateResourceError: If the email is already registered
        """
        try:
            user = await self.user_repo.create_user(user_data.model_dump())
            logger.info(f"User registered: {user.email} (ID: {user.id}, role: {user.role.value})")
            return user
        except ValueError as e:
            logger.warning(f"Registration rejected for {user_data.email}: {e}")
            if "already exists" in str(e):
                raise DuplicateResourceError(str(e))
            raise BadRequestError(str(e))

    async def authenticate_user(self, email: str, password: str) -> User:
        """
        Authenticate user with email and password.

        Raises:
            InvalidCredentialsError: If credentials are invalid
            InactiveUserError: If user account is inactive
        """
        user = await self.user_repo.get_by_email(email)

        if not user or not user.verify_password(password):
            logger.warning(f"Failed authentication attempt for email: {email}")
            raise InvalidCredentialsError()

        if not user.is_active:
            raise InactiveUserError()

        logger.info(f"User authenticated successfully: {user.email}")
        return user

    def create_tokens(self, user: User) -> Tuple[str, str]:
        """Access and refresh tokens for a user."""
        access_token = create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role
        )
        refresh_token = create_refresh_token(
            user_id=user.id,
            email=user.email
        )
        return access_token, refresh_token

    async def login(self, email: str, password: str) -> Tuple[User, str, str]:
        """
        Authenticate user and create tokens.

        Returns:
            Tuple of (user, access_token, refresh_token)
        """
        user = await self.authenticate_user(email, password)
        access_token, refresh_token = self.create_tokens(user)
        return user, access_token, refresh_token

    async def refresh_access_token(self, refresh_token: str) -> str:
        """
        Create new access token from refresh token.

        Raises:
            InvalidTokenError: If refresh token is invalid
            TokenExpiredError: If refresh token is expired
            InactiveUserError: If user account is inactive
        """
        user = await self._user_from_token(refresh_token, token_type="refresh")
        return create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role
        )

    async def get_current_user(self, token: str) -> User:
        """
        Get current user from access token.

        Raises:
            InvalidTokenError: If token is invalid or its user no longer exists
            TokenExpiredError: If token is expired
            InactiveUserError: If user account is inactive
        """
        return await self._user_from_token(token, token_type="access")

    async def _user_from_token(self, token: str, token_type: str) -> User:
        try:
            payload = verify_token(token, token_type=token_type)
            user_id = uuid.UUID(payload.user_id)
        except ExpiredSignatureError:
            raise TokenExpiredError()
        except (JWTError, ValueError) as e:
            raise InvalidTokenError(str(e) or "Invalid token")

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise InvalidTokenError("User for this token no longer exists")
        if not user.is_active:
            raise InactiveUserError()
        return user

    async def get_user_by_id(self, user_id: uuid.UUID) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def update_profile(self, current_user: User, profile_data: ProfileUpdate) -> User:
        """Apply the provided profile fields to the caller's own account."""
        update_data = profile_data.model_dump(exclude_unset=True)
        if not update_data:
            return current_user

        if "full_name" in update_data and not (update_data["full_name"] or "").strip():
            raise BadRequestError("Full name cannot be empty")

        updated_user = await self.user_repo.update(current_user.id, update_data)
        if not updated_user:
            raise NotFoundError("User", str(current_user.id))

        logger.info(f"Profile updated: {current_user.email}")
        return updated_user

