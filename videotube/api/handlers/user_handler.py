"""
User Handler

Registration, session (login / refresh / logout), account and channel
endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Session Transport (cookies)

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses (including the session cookies)

Service exceptions are not caught here; the global exception handlers
turn them into the standard error envelope.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from videotube.api.dependencies import CurrentUser, OptionalUser
from videotube.api.dependencies.services import (
    get_auth_service,
    get_channel_service,
    get_token_service,
    get_watch_history_service,
)
from videotube.api.session import (
    clear_session_cookies,
    read_refresh_token,
    set_session_cookies,
)
from videotube.config.settings import settings
from videotube.shared.core.exceptions import AuthenticationError
from videotube.shared.schemas.user import (
    AuthResponse,
    ChangePasswordRequest,
    ChannelProfileResponse,
    RefreshTokenRequest,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
    WatchHistoryItem,
)
from videotube.shared.services.auth_service import AuthService
from videotube.shared.services.channel_service import ChannelService
from videotube.shared.services.token_service import TokenService
from videotube.shared.services.watch_history_service import WatchHistoryService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# REGISTRATION & SESSION
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        409: If username or email already registered
    """
    return await auth_service.register_user(
        full_name=user_data.full_name,
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        avatar_url=user_data.avatar_url,
        cover_image_url=user_data.cover_image_url,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate by username or email and start a session.

    Sets the accessToken / refreshToken cookies and also returns both
    tokens in the body for clients without cookie support.

    Raises:
        401: INVALID_CREDENTIALS
    """
    user, pair = await auth_service.login_user(credentials.identifier, credentials.password)
    set_session_cookies(response, pair)

    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        expires_in=settings.access_token_max_age,
    )


@router.post("/refresh-token", response_model=TokenResponse)
async def refresh_token(
    request: Request,
    response: Response,
    body: Optional[RefreshTokenRequest] = None,
    token_service: TokenService = Depends(get_token_service),
):
    """
    Rotate the refresh token (cookie, else body) into a new pair.

    Raises:
        401: ROTATION_DENIED for an expired, forged, unknown or already used token
    """
    presented = read_refresh_token(request, body.refresh_token if body else None)
    if not presented:
        raise AuthenticationError("Unauthorized request")

    _, pair = await token_service.rotate(presented)
    set_session_cookies(response, pair)

    return TokenResponse(
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        expires_in=settings.access_token_max_age,
    )


@router.post("/logout")
async def logout(
    current_user: CurrentUser,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """End the session: clear the stored refresh token and both cookies."""
    await auth_service.logout_user(current_user.id)
    clear_session_cookies(response)
    return {}


# ═══════════════════════════════════════════════════════════════════════════════
# ACCOUNT
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("/change-password")
async def change_password(
    data: ChangePasswordRequest,
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Change the caller's password.

    Raises:
        401: INVALID_CREDENTIALS if old_password does not match
    """
    await auth_service.change_password(current_user.id, data.old_password, data.new_password)
    return {}


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser):
    return current_user


@router.patch("/me", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Update the caller's profile.

    Raises:
        409: If the new email belongs to another user
    """
    return await auth_service.update_account(
        current_user.id,
        full_name=data.full_name,
        email=data.email,
        avatar_url=data.avatar_url,
        cover_image_url=data.cover_image_url,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# CHANNEL & HISTORY
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/channel/{username}", response_model=ChannelProfileResponse)
async def get_channel_profile(
    username: str,
    viewer: OptionalUser,
    channel_service: ChannelService = Depends(get_channel_service),
):
    """Public channel profile with subscriber counts."""
    profile = await channel_service.get_profile(username, viewer.id if viewer else None)
    return ChannelProfileResponse(
        id=profile.user.id,
        username=profile.user.username,
        full_name=profile.user.full_name,
        avatar_url=profile.user.avatar_url,
        cover_image_url=profile.user.cover_image_url,
        subscribers_count=profile.subscribers_count,
        channels_subscribed_to_count=profile.channels_subscribed_to_count,
        is_subscribed=profile.is_subscribed,
    )


@router.get("/history", response_model=List[WatchHistoryItem])
async def get_watch_history(
    current_user: CurrentUser,
    history_service: WatchHistoryService = Depends(get_watch_history_service),
):
    """The caller's watch history, most recent first."""
    return await history_service.list(current_user.id)


@router.post("/history/{video_id}", response_model=List[WatchHistoryItem])
async def add_to_watch_history(
    video_id: str,
    current_user: CurrentUser,
    history_service: WatchHistoryService = Depends(get_watch_history_service),
):
    """
    Record that the caller watched a video.

    Raises:
        400: Malformed video id
        404: Video not found
    """
    return await history_service.record(current_user.id, video_id)
