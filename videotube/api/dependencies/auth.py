"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    get_access_claims()      ← Read access token (cookie or Bearer) and verify it
           │
           ▼
    get_current_user()       ← Load the user the token was minted for
           │
           ▼
    CurrentUser              ← Type alias used by most routes

    get_optional_user()      ← Same, but None for anonymous callers

Type Aliases:
=============
    CurrentUser   - Authenticated User model
    OptionalUser  - User model or None

Usage:
======
    from videotube.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user
"""

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from videotube.api.dependencies.database import DbSession
from videotube.api.session import read_access_token
from videotube.shared.core.exceptions import AuthenticationError
from videotube.shared.core.logging import log_context
from videotube.shared.models.user import User
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.services.token_service import AccessClaims, TokenService


# Security scheme for Bearer tokens (the cookie is checked first)
security = HTTPBearer(auto_error=False)


async def get_access_claims(
    request: Request,
    # Declares the Bearer scheme in OpenAPI; read_access_token reads the header itself
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> AccessClaims:
    """
    Extract and verify the access token.

    Returns:
        Claims of the verified token

    Raises:
        AuthenticationError: No token presented
        TokenExpiredError: Token expired, the client should rotate
        TokenInvalidError: Token is not a valid access token
    """
    token = read_access_token(request)
    if not token:
        raise AuthenticationError("Unauthorized request")

    return TokenService.verify_access(token)


async def get_current_user(
    claims: Annotated[AccessClaims, Depends(get_access_claims)],
    db: DbSession,
) -> User:
    """
    Get current authenticated user from token.

    Raises:
        AuthenticationError: The user behind the token no longer exists
    """
    user = await UserRepository(db).get(claims.user_id)
    if user is None:
        raise AuthenticationError("Invalid access token")

    log_context(user_id=str(user.id))
    return user


async def get_optional_user(request: Request, db: DbSession) -> Optional[User]:
    """Current user if a valid access token was presented, else None."""
    token = read_access_token(request)
    if not token:
        return None

    try:
        claims = TokenService.verify_access(token)
    except AuthenticationError:
        return None
    return await UserRepository(db).get(claims.user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[User, Depends(get_current_user)]

# Anonymous-friendly routes
OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]
