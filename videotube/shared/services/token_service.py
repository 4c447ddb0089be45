"""
Token Service

Issues, verifies, rotates and revokes the access/refresh token pair.

Session State Machine (per user):
=================================
    Unauthenticated ──issue()──► Active(A1, R1)
    Active(A1, R1) ──rotate(R1)──► Active(A2, R2)     R1 is dead from here on
    Active(*, *)   ──revoke()───► Unauthenticated     users.refresh_token = NULL

Token Shapes:
=============
    Access  (ACCESS_TOKEN_SECRET,  ACCESS_TOKEN_EXPIRE_MINUTES):
        {"sub": "<user id>", "type": "access", "username": ..., "email": ...,
         "full_name": ..., "iat": ..., "exp": ...}

    Refresh (REFRESH_TOKEN_SECRET, REFRESH_TOKEN_EXPIRE_DAYS):
        {"sub": "<user id>", "type": "refresh", "jti": "<random>", "iat": ..., "exp": ...}

The access token is stateless. The refresh token is only valid while it
is byte-for-byte the value stored in users.refresh_token, which makes it
single use: once rotated away it is rejected even though its signature
still checks out.

Rotation Race:
==============
Two requests presenting the same R1 both pass the equality check, but
the write is a conditional UPDATE (WHERE refresh_token = R1). Only the
first one changes a row; the second sees rowcount 0 and is denied.

Usage:
======
    from videotube.shared.services.token_service import TokenService

    service = TokenService(db)
    pair = await service.issue(user)
    claims = TokenService.verify_access(pair.access_token)
    user, new_pair = await service.rotate(pair.refresh_token)
    await service.revoke(user.id)
"""

import hmac
import uuid
from dataclasses import dataclass
from datetime import timedelta
from typing import Tuple
from uuid import UUID

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.config.settings import settings
from videotube.shared.core.exceptions import (
    AuthenticationError,
    RotationDeniedError,
    ServiceUnavailableError,
    TokenInvalidError,
)
from videotube.shared.core.logging import get_logger
from videotube.shared.models.user import User
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.utils.security import SecurityUtils


logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

# Attempts at the conditional refresh-token write during rotation
ROTATION_WRITE_ATTEMPTS = 2


@dataclass(frozen=True)
class TokenPair:
    """An access token and the refresh token minted with it."""

    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AccessClaims:
    """Principal claims carried by a verified access token."""

    user_id: UUID
    username: str
    email: str
    full_name: str


class TokenService:
    """
    Service for the token pair lifecycle.

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # ISSUE
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def build_pair(user: User) -> TokenPair:
        """Sign a fresh access/refresh pair for a user. Nothing is persisted."""
        access_token = SecurityUtils.create_token(
            claims={
                "sub": str(user.id),
                "type": ACCESS_TOKEN_TYPE,
                "username": user.username,
                "email": user.email,
                "full_name": user.full_name,
            },
            secret_key=settings.ACCESS_TOKEN_SECRET,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        refresh_token = SecurityUtils.create_token(
            claims={
                "sub": str(user.id),
                "type": REFRESH_TOKEN_TYPE,
                # Two pairs minted within the same second must still differ
                "jti": uuid.uuid4().hex,
            },
            secret_key=settings.REFRESH_TOKEN_SECRET,
            expires_delta=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
            algorithm=settings.JWT_ALGORITHM,
        )
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def issue(self, user: User) -> TokenPair:
        """
        Start a new session for a user who just proved their credentials.

        Both tokens are built before anything is written, so the stored
        refresh token never points at a pair that failed to materialize.
        Any previous session of the user is replaced.
        """
        pair = self.build_pair(user)
        await self.repo.set_refresh_token(user.id, pair.refresh_token)

        logger.info("Token pair issued", user_id=str(user.id))
        return pair

    # ═══════════════════════════════════════════════════════════════════════════
    # VERIFY
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def verify_access(token: str) -> AccessClaims:
        """
        Verify an access token.

        Returns:
            AccessClaims of the principal

        Raises:
            TokenExpiredError: Token is past its expiry; the client should rotate
            TokenInvalidError: Bad signature, malformed, wrong type or bad subject
        """
        payload = SecurityUtils.decode_token(
            token,
            settings.ACCESS_TOKEN_SECRET,
            algorithm=settings.JWT_ALGORITHM,
        )
        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise TokenInvalidError()

        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError:
            raise TokenInvalidError()

        return AccessClaims(
            user_id=user_id,
            username=payload.get("username", ""),
            email=payload.get("email", ""),
            full_name=payload.get("full_name", ""),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # ROTATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def rotate(self, refresh_token: str) -> Tuple[User, TokenPair]:
        """
        Exchange a live refresh token for a brand-new pair.

        Args:
            refresh_token: The refresh token the client presented

        Returns:
            Tuple of (user, new token pair)

        Raises:
            RotationDeniedError: Bad signature, expired, unknown user, token
                no longer the stored one, or a concurrent rotation won
            ServiceUnavailableError: The database stayed unreachable for the
                conditional write after one retry
        """
        try:
            payload = SecurityUtils.decode_token(
                refresh_token,
                settings.REFRESH_TOKEN_SECRET,
                algorithm=settings.JWT_ALGORITHM,
            )
        except AuthenticationError as e:
            logger.warning("Refresh token rotation denied", reason=e.error_code)
            raise RotationDeniedError()

        if payload.get("type") != REFRESH_TOKEN_TYPE:
            logger.warning("Refresh token rotation denied", reason="wrong_type")
            raise RotationDeniedError()

        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError:
            logger.warning("Refresh token rotation denied", reason="bad_subject")
            raise RotationDeniedError()

        user = await self.repo.get(user_id)
        if user is None:
            logger.warning("Refresh token rotation denied", reason="unknown_user", user_id=str(user_id))
            raise RotationDeniedError()

        if not user.refresh_token or not hmac.compare_digest(
            refresh_token.encode(), user.refresh_token.encode()
        ):
            logger.warning("Refresh token rotation denied", reason="stale", user_id=str(user_id))
            raise RotationDeniedError()

        pair = self.build_pair(user)

        if not await self._replace_refresh_token(user_id, refresh_token, pair.refresh_token):
            logger.warning("Refresh token rotation denied", reason="lost_race", user_id=str(user_id))
            raise RotationDeniedError()

        logger.info("Refresh token rotated", user_id=str(user_id))
        return user, pair

    async def _replace_refresh_token(self, user_id: UUID, expected: str, new: str) -> bool:
        """Conditional write, retried once on a transient database error."""
        for attempt in range(1, ROTATION_WRITE_ATTEMPTS + 1):
            try:
                async with self.session.begin_nested():
                    return await self.repo.replace_refresh_token(user_id, expected, new)
            except OperationalError as e:
                logger.warning(
                    "Refresh token write failed",
                    user_id=str(user_id),
                    attempt=attempt,
                    error=type(e.orig).__name__ if e.orig is not None else type(e).__name__,
                )
        raise ServiceUnavailableError("Could not refresh the session, please retry")

    # ═══════════════════════════════════════════════════════════════════════════
    # REVOKE
    # ═══════════════════════════════════════════════════════════════════════════

    async def revoke(self, user_id: UUID) -> None:
        """End the user's session. Idempotent."""
        await self.repo.set_refresh_token(user_id, None)
        logger.info("Session revoked", user_id=str(user_id))
