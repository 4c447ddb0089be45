"""
Video Service

Business logic for publishing and managing videos.

The media files themselves live in the object store. Uploads happen
before this service is called; it only records the handles (URLs) the
store returned. Every mutation goes through the OwnershipGuard.

Usage:
======
    from videotube.shared.services.video_service import VideoService

    service = VideoService(db)
    video = await service.publish(user.id, title="...", video_url=..., thumbnail_url=...)
    await service.delete(video.id, user.id)
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import NotFoundError, UserNotFoundError
from videotube.shared.core.logging import get_logger
from videotube.shared.models.enums import RelationKind, ResourceKind
from videotube.shared.models.video import Video
from videotube.shared.repositories.comment_repository import CommentRepository
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.repositories.video_repository import VideoRepository
from videotube.shared.services.ownership_guard import OwnershipGuard, parse_identifier


logger = get_logger(__name__)


class VideoService:
    """
    Service for video operations.

    Attributes:
        session: Database session
        repo: VideoRepository instance
        guard: OwnershipGuard instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = VideoRepository(session)
        self.guard = OwnershipGuard(session)

    async def publish(
        self,
        owner_id: UUID,
        title: str,
        video_url: str,
        thumbnail_url: str,
        description: str = "",
        duration: float = 0.0,
    ) -> Video:
        """Record a freshly uploaded video for its owner."""
        video = await self.repo.create(
            owner_id=owner_id,
            title=title,
            description=description,
            video_url=video_url,
            thumbnail_url=thumbnail_url,
            duration=duration,
        )
        logger.info("Video published", video_id=str(video.id), user_id=str(owner_id))
        return video

    async def get_video(self, video_id: Any, viewer_id: Optional[UUID] = None) -> Video:
        """
        Get a video by id.

        Unpublished videos are only visible to their owner.

        Raises:
            InvalidIdentifierError: Malformed video_id
            NotFoundError: No such (visible) video
        """
        video_uuid = parse_identifier(video_id, "video")
        video = await self.repo.get_visible(video_uuid, viewer_id)
        if video is None:
            raise NotFoundError("Video", str(video_uuid))
        return video

    async def record_view(self, video: Video) -> Video:
        """Count one view of a video that was just served."""
        return await self.repo.increment_views(video)

    async def list_user_videos(
        self,
        user_id: Any,
        viewer_id: Optional[UUID] = None,
        *,
        search: Optional[str] = None,
        sort_by: str = "created_at",
        descending: bool = True,
        offset: int = 0,
        limit: int = 10,
    ) -> list[Video]:
        """A channel's videos; unpublished ones only for the channel owner."""
        user_uuid = parse_identifier(user_id, "user")
        if not await UserRepository(self.session).exists(user_uuid):
            raise UserNotFoundError(str(user_uuid))

        return await self.repo.get_owner_videos(
            user_uuid,
            published_only=user_uuid != viewer_id,
            search=search,
            sort_by=sort_by,
            descending=descending,
            offset=offset,
            limit=limit,
        )

    async def update(
        self,
        video_id: Any,
        principal_id: UUID,
        title: Optional[str] = None,
        description: Optional[str] = None,
        thumbnail_url: Optional[str] = None,
    ) -> Video:
        """Update video metadata. Owner only."""
        video = await self.guard.authorize(video_id, ResourceKind.VIDEO, principal_id)
        return await self.repo.update_instance(
            video,
            title=title,
            description=description,
            thumbnail_url=thumbnail_url,
        )

    async def toggle_publish(self, video_id: Any, principal_id: UUID) -> Video:
        """Flip is_published. Owner only."""
        video = await self.guard.authorize(video_id, ResourceKind.VIDEO, principal_id)
        return await self.repo.update_instance(video, is_published=not video.is_published)

    async def delete(self, video_id: Any, principal_id: UUID) -> Video:
        """
        Delete a video. Owner only.

        Likes on the video and on its comments go with it; the comments
        themselves cascade in the database.

        Returns:
            The deleted video, so the caller can release its media handles
        """
        video = await self.guard.authorize(video_id, ResourceKind.VIDEO, principal_id)

        relations = ToggleRelationRepository(self.session)
        comment_ids = await CommentRepository(self.session).get_video_comment_ids(video.id)
        await relations.delete_for_targets(comment_ids, RelationKind.COMMENT_LIKE)
        await relations.delete_for_targets([video.id], RelationKind.VIDEO_LIKE)

        await self.repo.delete_instance(video)
        logger.info("Video deleted", video_id=str(video.id), user_id=str(principal_id))
        return video
