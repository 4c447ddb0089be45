"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from videotube.api.dependencies.services import get_auth_service

    @router.post("/register")
    async def register(
        data: UserCreate,
        auth_service: AuthService = Depends(get_auth_service)
    ):
        return await auth_service.register_user(...)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.api.dependencies.database import get_db
from videotube.shared.services.auth_service import AuthService
from videotube.shared.services.channel_service import ChannelService
from videotube.shared.services.comment_service import CommentService
from videotube.shared.services.playlist_service import PlaylistService
from videotube.shared.services.toggle_service import ToggleService
from videotube.shared.services.token_service import TokenService
from videotube.shared.services.tweet_service import TweetService
from videotube.shared.services.video_service import VideoService
from videotube.shared.services.watch_history_service import WatchHistoryService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_token_service(
    db: AsyncSession = Depends(get_db),
) -> TokenService:
    return TokenService(db)


async def get_toggle_service(
    db: AsyncSession = Depends(get_db),
) -> ToggleService:
    return ToggleService(db)


async def get_watch_history_service(
    db: AsyncSession = Depends(get_db),
) -> WatchHistoryService:
    return WatchHistoryService(db)


async def get_channel_service(
    db: AsyncSession = Depends(get_db),
) -> ChannelService:
    return ChannelService(db)


async def get_video_service(
    db: AsyncSession = Depends(get_db),
) -> VideoService:
    return VideoService(db)


async def get_playlist_service(
    db: AsyncSession = Depends(get_db),
) -> PlaylistService:
    return PlaylistService(db)


async def get_tweet_service(
    db: AsyncSession = Depends(get_db),
) -> TweetService:
    return TweetService(db)


async def get_comment_service(
    db: AsyncSession = Depends(get_db),
) -> CommentService:
    return CommentService(db)
