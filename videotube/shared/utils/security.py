"""
Security Utilities

Password hashing (the credential verifier) and JWT encoding helpers.

Password Hashing:
=================
Uses bcrypt through passlib's CryptContext. The cost factor comes from
settings.BCRYPT_ROUNDS (default 10). A failed verification is always a
plain False: a wrong password, a corrupt digest and an empty digest are
indistinguishable to the caller.

Hashing is deliberately slow, so request handlers use the *_async
variants, which run the hash in Starlette's threadpool instead of
blocking the event loop.

JWT Tokens:
===========
Uses PyJWT. Decoding maps PyJWT failures onto the application's
TokenExpiredError / TokenInvalidError.

Usage:
======
    from videotube.shared.utils.security import SecurityUtils

    # Hash password
    digest = await SecurityUtils.hash_password_async("password123")

    # Verify password
    if await SecurityUtils.verify_password_async("password123", digest):
        print("Password matches!")

    # Create JWT
    token = SecurityUtils.create_token(
        claims={"sub": "123", "type": "access"},
        secret_key=settings.ACCESS_TOKEN_SECRET,
        expires_delta=timedelta(minutes=15),
    )

    # Decode JWT
    payload = SecurityUtils.decode_token(token, settings.ACCESS_TOKEN_SECRET)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from videotube.config.settings import settings
from videotube.shared.core.exceptions import TokenExpiredError, TokenInvalidError


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt (sync and threadpool variants)
    - JWT token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Bcrypt automatically:
        - Generates a random salt
        - Uses the configured work factor
        - Produces a hash that includes the salt

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against bcrypt hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise (including when the
            stored hash is missing or malformed)
        """
        if not hashed_password:
            return False
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # Unidentifiable or corrupt hash
            return False

    @staticmethod
    async def hash_password_async(password: str) -> str:
        """hash_password() off the event loop."""
        return await run_in_threadpool(SecurityUtils.hash_password, password)

    @staticmethod
    async def verify_password_async(plain_password: str, hashed_password: Optional[str]) -> bool:
        """verify_password() off the event loop."""
        return await run_in_threadpool(
            SecurityUtils.verify_password, plain_password, hashed_password
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_token(
        claims: dict[str, Any],
        secret_key: str,
        expires_delta: timedelta,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed JWT.

        Args:
            claims: Payload data to encode (e.g., sub, type, username)
            secret_key: Secret key for signing
            expires_delta: Token lifetime
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = claims.copy()

        now = datetime.now(timezone.utc)
        to_encode.update({
            "exp": now + expires_delta,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Decode and verify a JWT.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            TokenExpiredError: Signature is valid but the token is past exp
            TokenInvalidError: Bad signature, malformed token or missing claims
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError()
        except jwt.InvalidTokenError:
            raise TokenInvalidError()
