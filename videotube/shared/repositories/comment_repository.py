"""
Comment repository for data access.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.models.comment import Comment
from videotube.shared.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def get_video_comments(
        self,
        video_id: UUID,
        *,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Comment]:
        """Comments on a video, newest first."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.video_id == video_id)
            .order_by(Comment.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_video_comment_ids(self, video_id: UUID) -> list[UUID]:
        result = await self.session.execute(select(Comment.id).where(Comment.video_id == video_id))
        return list(result.scalars().all())
