"""
Video repository for data access.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.models.video import Video
from videotube.shared.repositories.base import BaseRepository


SORTABLE_FIELDS = frozenset({"created_at", "title", "views", "duration"})


class VideoRepository(BaseRepository[Video]):
    """Repository for Video entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Video, session)

    async def get_owner_videos(
        self,
        owner_id: UUID,
        *,
        published_only: bool = False,
        search: Optional[str] = None,
        sort_by: str = "created_at",
        descending: bool = True,
        offset: int = 0,
        limit: int = 100,
    ) -> list[Video]:
        """
        Videos of a channel.

        Args:
            owner_id: Channel (user) id
            published_only: Hide unpublished videos
            search: Case-insensitive title substring
            sort_by: One of SORTABLE_FIELDS
            descending: Sort direction
        """
        stmt = select(Video).where(Video.owner_id == owner_id)
        if published_only:
            stmt = stmt.where(Video.is_published.is_(True))
        if search:
            stmt = stmt.where(Video.title.ilike(f"%{search}%"))

        order_field = getattr(Video, sort_by if sort_by in SORTABLE_FIELDS else "created_at")
        stmt = stmt.order_by(order_field.desc() if descending else order_field.asc(), Video.id)
        stmt = stmt.offset(offset).limit(limit)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_visible(self, video_id: UUID, viewer_id: Optional[UUID] = None) -> Optional[Video]:
        """A video if it is published or owned by the viewer, else None."""
        video = await self.get(video_id)
        if video is None or (not video.is_published and video.owner_id != viewer_id):
            return None
        return video

    async def get_owner_video_ids(self, owner_id: UUID) -> list[UUID]:
        result = await self.session.execute(select(Video.id).where(Video.owner_id == owner_id))
        return list(result.scalars().all())

    async def total_views(self, owner_id: UUID) -> int:
        """Sum of views across a channel's videos."""
        result = await self.session.execute(
            select(func.coalesce(func.sum(Video.views), 0)).where(Video.owner_id == owner_id)
        )
        return int(result.scalar() or 0)

    async def increment_views(self, video: Video) -> Optional[Video]:
        """Bump the view counter of a loaded video."""
        video.views = Video.views + 1
        await self.session.flush()
        await self.session.refresh(video)
        return video
