"""
Channel Service

Read-side views of a user's channel: the public profile and the owner's
dashboard stats. All counts are derived from rows, nothing is cached.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import NotFoundError, UserNotFoundError
from videotube.shared.models.enums import RelationKind
from videotube.shared.models.user import User
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.repositories.video_repository import VideoRepository


@dataclass
class ChannelProfile:
    """A channel as seen by a (possibly anonymous) viewer."""

    user: User
    subscribers_count: int
    channels_subscribed_to_count: int
    is_subscribed: bool


@dataclass
class ChannelStats:
    """Dashboard numbers for a channel owner."""

    total_videos: int
    total_views: int
    total_subscribers: int
    total_likes: int


class ChannelService:
    """Service for channel profile and dashboard queries."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.videos = VideoRepository(session)
        self.relations = ToggleRelationRepository(session)

    async def get_profile(self, username: str, viewer_id: Optional[UUID] = None) -> ChannelProfile:
        """
        Channel profile by username.

        Raises:
            NotFoundError: No user with that username
        """
        user = await self.users.get_by_username(username.strip())
        if user is None:
            raise NotFoundError("Channel")

        is_subscribed = False
        if viewer_id is not None:
            is_subscribed = (
                await self.relations.get_relation(viewer_id, user.id, RelationKind.SUBSCRIPTION)
                is not None
            )

        return ChannelProfile(
            user=user,
            subscribers_count=await self.relations.count_for_target(user.id, RelationKind.SUBSCRIPTION),
            channels_subscribed_to_count=await self.relations.count_for_subject(
                user.id, RelationKind.SUBSCRIPTION
            ),
            is_subscribed=is_subscribed,
        )

    async def get_stats(self, user_id: UUID) -> ChannelStats:
        """Totals over the user's own videos."""
        if not await self.users.exists(user_id):
            raise UserNotFoundError(str(user_id))

        video_ids = await self.videos.get_owner_video_ids(user_id)
        return ChannelStats(
            total_videos=len(video_ids),
            total_views=await self.videos.total_views(user_id),
            total_subscribers=await self.relations.count_for_target(user_id, RelationKind.SUBSCRIPTION),
            total_likes=await self.relations.count_for_targets(video_ids, RelationKind.VIDEO_LIKE),
        )
