"""
Session Transport

Carries the token pair between client and server as two http-only,
secure, same-site cookies. Token contents are never inspected here; this
module only moves opaque strings across the HTTP boundary.

Cookies:
========
    accessToken   max_age = ACCESS_TOKEN_EXPIRE_MINUTES
    refreshToken  max_age = REFRESH_TOKEN_EXPIRE_DAYS

    HttpOnly; Secure (COOKIE_SECURE); SameSite (COOKIE_SAMESITE); Path=/

Fallbacks for clients without cookie support:
=============================================
    access token   ← Authorization: Bearer <token>
    refresh token  ← {"refresh_token": "..."} in the request body

Usage:
======
    from videotube.api.session import set_session_cookies, clear_session_cookies

    @router.post("/login")
    async def login(response: Response, ...):
        user, pair = await service.login_user(...)
        set_session_cookies(response, pair)
"""

from typing import Optional

from fastapi import Request, Response

from videotube.config.settings import settings
from videotube.shared.services.token_service import TokenPair


ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"

BEARER_PREFIX = "bearer "


def _cookie_attributes() -> dict:
    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": settings.COOKIE_SAMESITE,
        "path": "/",
        "domain": settings.COOKIE_DOMAIN,
    }


def set_session_cookies(response: Response, pair: TokenPair) -> None:
    """Attach both tokens to the response as cookies."""
    attributes = _cookie_attributes()
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        pair.access_token,
        max_age=settings.access_token_max_age,
        **attributes,
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        pair.refresh_token,
        max_age=settings.refresh_token_max_age,
        **attributes,
    )


def clear_session_cookies(response: Response) -> None:
    """Expire both cookies on the client."""
    attributes = _cookie_attributes()
    response.delete_cookie(ACCESS_TOKEN_COOKIE, **attributes)
    response.delete_cookie(REFRESH_TOKEN_COOKIE, **attributes)


def read_access_token(request: Request) -> Optional[str]:
    """Access token from the cookie, else from the Authorization header."""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    if authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip() or None
    return None


def read_refresh_token(request: Request, body_token: Optional[str] = None) -> Optional[str]:
    """Refresh token from the cookie, else from the request body."""
    return request.cookies.get(REFRESH_TOKEN_COOKIE) or body_token or None
