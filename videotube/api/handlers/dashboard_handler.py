"""
Dashboard Handler

Channel statistics and the owner's full video list.
"""

from typing import List

from fastapi import APIRouter, Depends

from videotube.api.dependencies import CurrentUser
from videotube.api.dependencies.services import get_channel_service, get_video_service
from videotube.shared.schemas.content import VideoResponse
from videotube.shared.schemas.relation import ChannelStatsResponse
from videotube.shared.services.channel_service import ChannelService
from videotube.shared.services.video_service import VideoService


router = APIRouter()


@router.get("/stats", response_model=ChannelStatsResponse)
async def get_channel_stats(
    current_user: CurrentUser,
    channel_service: ChannelService = Depends(get_channel_service),
):
    """Total videos, views, subscribers and likes of the caller's channel."""
    stats = await channel_service.get_stats(current_user.id)
    return ChannelStatsResponse(
        total_videos=stats.total_videos,
        total_views=stats.total_views,
        total_subscribers=stats.total_subscribers,
        total_likes=stats.total_likes,
    )


@router.get("/videos", response_model=List[VideoResponse])
async def get_channel_videos(
    current_user: CurrentUser,
    video_service: VideoService = Depends(get_video_service),
):
    """All of the caller's videos, published or not."""
    return await video_service.list_user_videos(current_user.id, current_user.id, limit=1000)
