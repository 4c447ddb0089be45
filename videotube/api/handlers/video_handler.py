"""
Video Handler

Video publishing and management. Media upload to the object store
happens before these endpoints are called; they receive the handles.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from videotube.api.dependencies import CurrentUser, OptionalUser
from videotube.api.dependencies.services import get_video_service
from videotube.shared.schemas.common import MessageResponse, PaginationParams, SortParams
from videotube.shared.schemas.content import VideoCreate, VideoResponse, VideoUpdate
from videotube.shared.services.video_service import VideoService


router = APIRouter()


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def publish_video(
    data: VideoCreate,
    current_user: CurrentUser,
    video_service: VideoService = Depends(get_video_service),
):
    """Publish a video on the caller's channel."""
    return await video_service.publish(
        current_user.id,
        title=data.title,
        description=data.description,
        video_url=data.video_url,
        thumbnail_url=data.thumbnail_url,
        duration=data.duration,
    )


@router.get("", response_model=List[VideoResponse])
async def list_videos(
    viewer: OptionalUser,
    user_id: str = Query(..., description="Channel whose videos to list"),
    query: Optional[str] = Query(None, description="Title search"),
    pagination: PaginationParams = Depends(),
    sorting: SortParams = Depends(),
    video_service: VideoService = Depends(get_video_service),
):
    """
    List a channel's videos.

    Unpublished videos are included only when the caller owns the channel.
    """
    return await video_service.list_user_videos(
        user_id,
        viewer.id if viewer else None,
        search=query,
        sort_by=sorting.sort_by,
        descending=sorting.descending,
        offset=pagination.offset,
        limit=pagination.limit,
    )


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: str,
    viewer: OptionalUser,
    video_service: VideoService = Depends(get_video_service),
):
    """Get a video and count the view. Unpublished videos are visible to their owner only."""
    video = await video_service.get_video(video_id, viewer.id if viewer else None)
    return await video_service.record_view(video)


@router.patch("/{video_id}", response_model=VideoResponse)
async def update_video(
    video_id: str,
    data: VideoUpdate,
    current_user: CurrentUser,
    video_service: VideoService = Depends(get_video_service),
):
    """
    Update video metadata.

    Raises:
        400: Malformed id
        403: Caller does not own the video
        404: Video not found
    """
    return await video_service.update(
        video_id,
        current_user.id,
        title=data.title,
        description=data.description,
        thumbnail_url=data.thumbnail_url,
    )


@router.patch("/{video_id}/publish", response_model=VideoResponse)
async def toggle_publish_status(
    video_id: str,
    current_user: CurrentUser,
    video_service: VideoService = Depends(get_video_service),
):
    return await video_service.toggle_publish(video_id, current_user.id)


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(
    video_id: str,
    current_user: CurrentUser,
    video_service: VideoService = Depends(get_video_service),
):
    await video_service.delete(video_id, current_user.id)
    return MessageResponse(message="Video deleted successfully")
