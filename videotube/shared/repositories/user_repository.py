"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with lookup methods and the refresh-token writes
that back the Token Service.

Common Operations:
==================
- get_by_email() / get_by_username() / get_by_identifier()
- email_exists() / username_exists()
- set_refresh_token()       → Unconditional replace (login) or clear (logout)
- replace_refresh_token()   → Conditional replace (rotation)

Refresh Token Writes:
=====================
Rotation must be serialized per user. replace_refresh_token() issues a
single conditional UPDATE:

    UPDATE users SET refresh_token = :new
    WHERE id = :id AND refresh_token = :expected

The database applies it atomically, so when two rotations race on the
same old token only one of them matches a row. The loser sees rowcount 0.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.repositories.base import BaseRepository
from videotube.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (stored lowercased).

        SQL Generated:
            SELECT * FROM users WHERE email = 'user@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username (stored lowercased)."""
        result = await self.session.execute(
            select(User).where(User.username == username.lower())
        )
        return result.scalar_one_or_none()

    async def get_by_identifier(self, identifier: str) -> Optional[User]:
        """
        Get user by username OR email.

        Login accepts either; both columns are unique so at most one
        row can match a given lowercased identifier.
        """
        value = identifier.strip().lower()
        result = await self.session.execute(
            select(User).where(or_(User.username == value, User.email == value))
        )
        return result.scalars().first()

    async def email_exists(self, email: str) -> bool:
        """Check if email already exists."""
        return await self.get_by_email(email) is not None

    async def username_exists(self, username: str) -> bool:
        """Check if username already exists."""
        return await self.get_by_username(username) is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # REFRESH TOKEN
    # ═══════════════════════════════════════════════════════════════════════════

    async def set_refresh_token(self, user_id: UUID, refresh_token: Optional[str]) -> None:
        """
        Replace (or clear, with None) the stored refresh token.

        Used at login, where the new token wins regardless of the old
        value, and at logout.
        """
        await self.session.execute(
            update(User)
            .where(User.id == user_id)
            .values(refresh_token=refresh_token)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()

    async def replace_refresh_token(
        self,
        user_id: UUID,
        expected: str,
        new: str,
    ) -> bool:
        """
        Conditionally swap the stored refresh token.

        Args:
            user_id: Principal id
            expected: The token the caller presented (must still be stored)
            new: The freshly issued token

        Returns:
            True if the swap happened, False if the stored token was
            already something else (stale token or lost race)
        """
        result = await self.session.execute(
            update(User)
            .where(User.id == user_id, User.refresh_token == expected)
            .values(refresh_token=new)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount == 1
