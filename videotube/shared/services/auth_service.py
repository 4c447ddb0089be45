"""
Authentication Service

Business logic for user registration, login and account management.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Other services (TokenService for the session lifecycle)
- Domain logic

Usage:
======
    from videotube.shared.services.auth_service import AuthService

    service = AuthService(db)
    user = await service.register_user(full_name, username, email, password)
    user, pair = await service.login_user("chaiaurcode", password)
"""

from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import (
    DuplicateResourceError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from videotube.shared.core.logging import get_logger
from videotube.shared.models.user import User
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.services.token_service import TokenPair, TokenService
from videotube.shared.utils.security import SecurityUtils


logger = get_logger(__name__)


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration
    - User authentication (login) and logout
    - Password change and account updates

    Attributes:
        session: Database session
        repo: UserRepository instance
        tokens: TokenService instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)
        self.tokens = TokenService(session)

    async def register_user(
        self,
        full_name: str,
        username: str,
        email: str,
        password: str,
        avatar_url: Optional[str] = None,
        cover_image_url: Optional[str] = None,
    ) -> User:
        """
        Register a new user.

        Username and email are stored lowercased. Registration does not
        start a session; the client logs in afterwards.

        Raises:
            DuplicateResourceError: If username or email is taken

        Example:
            user = await service.register_user(
                full_name="Hitesh C",
                username="chaiaurcode",
                email="user@example.com",
                password="secure_password123",
            )
        """
        username = username.strip().lower()
        email = email.strip().lower()

        if await self.repo.username_exists(username) or await self.repo.email_exists(email):
            raise DuplicateResourceError("User with email or username already exists")

        # Hash password using bcrypt
        password_hash = await SecurityUtils.hash_password_async(password)

        user = await self.repo.create(
            full_name=full_name.strip(),
            username=username,
            email=email,
            password_hash=password_hash,
            avatar_url=avatar_url,
            cover_image_url=cover_image_url,
        )

        logger.info("User registered", user_id=str(user.id))
        return user

    async def login_user(self, identifier: str, password: str) -> Tuple[User, TokenPair]:
        """
        Authenticate a user and start a session.

        Args:
            identifier: Username or email
            password: Plain text password

        Returns:
            Tuple of (user, token pair)

        Raises:
            InvalidCredentialsError: Unknown user or wrong password (same message)
        """
        user = await self.repo.get_by_identifier(identifier.strip())
        if not user:
            raise InvalidCredentialsError()

        if not await SecurityUtils.verify_password_async(password, user.password_hash):
            logger.warning("Login failed", user_id=str(user.id))
            raise InvalidCredentialsError()

        pair = await self.tokens.issue(user)

        logger.info("User logged in", user_id=str(user.id))
        return user, pair

    async def logout_user(self, user_id: UUID) -> None:
        """End the user's session server-side."""
        await self.tokens.revoke(user_id)
        logger.info("User logged out", user_id=str(user_id))

    async def get_user(self, user_id: UUID) -> User:
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    async def change_password(self, user_id: UUID, old_password: str, new_password: str) -> None:
        """
        Replace the user's password.

        The current session stays valid.

        Raises:
            InvalidCredentialsError: old_password does not match
        """
        user = await self.get_user(user_id)

        if not await SecurityUtils.verify_password_async(old_password, user.password_hash):
            raise InvalidCredentialsError("Invalid old password")

        password_hash = await SecurityUtils.hash_password_async(new_password)
        await self.repo.update_instance(user, password_hash=password_hash)

        logger.info("Password changed", user_id=str(user_id))

    async def update_account(
        self,
        user_id: UUID,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        avatar_url: Optional[str] = None,
        cover_image_url: Optional[str] = None,
    ) -> User:
        """
        Update profile fields. None leaves a field unchanged.

        Raises:
            DuplicateResourceError: If the new email belongs to another user
        """
        user = await self.get_user(user_id)

        if email is not None:
            email = email.strip().lower()
            owner = await self.repo.get_by_email(email)
            if owner is not None and owner.id != user.id:
                raise DuplicateResourceError("Email already registered")

        return await self.repo.update_instance(
            user,
            full_name=full_name.strip() if full_name is not None else None,
            email=email,
            avatar_url=avatar_url,
            cover_image_url=cover_image_url,
        )
