"""
Like Handler

Like toggles on videos, comments and tweets.
"""

from enum import Enum
from typing import List

from fastapi import APIRouter, Depends

from videotube.api.dependencies import CurrentUser
from videotube.api.dependencies.services import get_toggle_service
from videotube.shared.models.enums import RelationKind
from videotube.shared.schemas.content import VideoResponse
from videotube.shared.schemas.relation import LikeToggleResponse
from videotube.shared.services.ownership_guard import parse_identifier
from videotube.shared.services.toggle_service import ToggleService


router = APIRouter()


class LikeTarget(str, Enum):
    """Path segment naming what is being liked."""

    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"


LIKE_KINDS = {
    LikeTarget.VIDEO: RelationKind.VIDEO_LIKE,
    LikeTarget.COMMENT: RelationKind.COMMENT_LIKE,
    LikeTarget.TWEET: RelationKind.TWEET_LIKE,
}


@router.post("/toggle/{target}/{target_id}", response_model=LikeToggleResponse)
async def toggle_like(
    target: LikeTarget,
    target_id: str,
    current_user: CurrentUser,
    toggle_service: ToggleService = Depends(get_toggle_service),
):
    """
    Like or unlike a video, comment or tweet.

    Returns:
        status "created" when the like now exists, "deleted" when removed

    Raises:
        400: Malformed id
        404: Target not found
    """
    kind = LIKE_KINDS[target]
    outcome = await toggle_service.toggle(current_user.id, target_id, kind)
    likes_count = await toggle_service.count(parse_identifier(target_id, target.value), kind)
    return LikeToggleResponse(status=outcome, likes_count=likes_count)


@router.get("/videos", response_model=List[VideoResponse])
async def get_liked_videos(
    current_user: CurrentUser,
    toggle_service: ToggleService = Depends(get_toggle_service),
):
    """Videos the caller liked, most recent like first."""
    return await toggle_service.liked_videos(current_user.id)
