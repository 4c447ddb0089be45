"""
WatchHistoryEntry repository for data access.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.models.watch_history import WatchHistoryEntry
from videotube.shared.repositories.base import BaseRepository


class WatchHistoryRepository(BaseRepository[WatchHistoryEntry]):
    """Repository for WatchHistoryEntry entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(WatchHistoryEntry, session)

    async def remove_video(self, user_id: UUID, video_id: UUID) -> None:
        """Drop the user's entry for a video, if any."""
        await self.session.execute(
            delete(WatchHistoryEntry)
            .where(
                WatchHistoryEntry.user_id == user_id,
                WatchHistoryEntry.video_id == video_id,
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()

    async def add_or_touch(self, user_id: UUID, video_id: UUID, watched_at: datetime) -> bool:
        """
        Insert a new entry at the head of the history.

        The INSERT runs in a SAVEPOINT. If a concurrent request already
        inserted the same (user, video) pair, the unique constraint rejects
        this one and the existing row is re-stamped instead.

        Returns:
            True if this call inserted the row, False if it re-stamped one
        """
        try:
            async with self.session.begin_nested():
                self.session.add(
                    WatchHistoryEntry(user_id=user_id, video_id=video_id, watched_at=watched_at)
                )
        except IntegrityError:
            await self.session.execute(
                update(WatchHistoryEntry)
                .where(
                    WatchHistoryEntry.user_id == user_id,
                    WatchHistoryEntry.video_id == video_id,
                )
                .values(watched_at=watched_at)
                .execution_options(synchronize_session="fetch")
            )
            await self.session.flush()
            return False
        return True

    async def truncate(self, user_id: UUID, keep: int) -> int:
        """
        Delete everything but the `keep` most recent entries.

        Returns:
            Number of evicted entries
        """
        overflow = await self.session.execute(
            select(WatchHistoryEntry.id)
            .where(WatchHistoryEntry.user_id == user_id)
            .order_by(WatchHistoryEntry.watched_at.desc(), WatchHistoryEntry.id.desc())
            .offset(keep)
        )
        stale_ids = list(overflow.scalars().all())
        if not stale_ids:
            return 0

        await self.session.execute(
            delete(WatchHistoryEntry)
            .where(WatchHistoryEntry.id.in_(stale_ids))
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return len(stale_ids)

    async def list_for_user(self, user_id: UUID) -> list[WatchHistoryEntry]:
        """Entries with their videos, most recent first."""
        result = await self.session.execute(
            select(WatchHistoryEntry)
            .where(WatchHistoryEntry.user_id == user_id)
            .order_by(WatchHistoryEntry.watched_at.desc(), WatchHistoryEntry.id.desc())
        )
        return list(result.unique().scalars().all())
