"""
Comment Service

Comments on videos. Only the author may edit or delete a comment. Unpublished videos take
comments only from their owner.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import NotFoundError
from videotube.shared.models.comment import Comment
from videotube.shared.models.enums import RelationKind, ResourceKind
from videotube.shared.repositories.comment_repository import CommentRepository
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.repositories.video_repository import VideoRepository
from videotube.shared.services.ownership_guard import OwnershipGuard, parse_identifier


class CommentService:
    """Service for comment operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = CommentRepository(session)
        self.guard = OwnershipGuard(session)

    async def _require_video(self, video_id: Any, viewer_id: Optional[UUID]) -> UUID:
        video_uuid = parse_identifier(video_id, "video")
        if await VideoRepository(self.session).get_visible(video_uuid, viewer_id) is None:
            raise NotFoundError("Video", str(video_uuid))
        return video_uuid

    async def list_video_comments(
        self,
        video_id: Any,
        viewer_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> list[Comment]:
        video_uuid = await self._require_video(video_id, viewer_id)
        return await self.repo.get_video_comments(video_uuid, offset=offset, limit=limit)

    async def add(self, video_id: Any, owner_id: UUID, content: str) -> Comment:
        video_uuid = await self._require_video(video_id, owner_id)
        return await self.repo.create(video_id=video_uuid, owner_id=owner_id, content=content)

    async def update(self, comment_id: Any, principal_id: UUID, content: str) -> Comment:
        comment = await self.guard.authorize(comment_id, ResourceKind.COMMENT, principal_id)
        return await self.repo.update_instance(comment, content=content)

    async def delete(self, comment_id: Any, principal_id: UUID) -> None:
        comment = await self.guard.authorize(comment_id, ResourceKind.COMMENT, principal_id)
        await ToggleRelationRepository(self.session).delete_for_targets(
            [comment.id], RelationKind.COMMENT_LIKE
        )
        await self.repo.delete_instance(comment)
