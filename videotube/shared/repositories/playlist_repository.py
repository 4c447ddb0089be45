"""
Playlist repository for data access.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.models.playlist import Playlist
from videotube.shared.models.video import Video
from videotube.shared.repositories.base import BaseRepository


class PlaylistRepository(BaseRepository[Playlist]):
    """Repository for Playlist entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Playlist, session)

    async def get_by_owner_and_name(self, owner_id: UUID, name: str) -> Optional[Playlist]:
        """Playlist names are unique per owner."""
        result = await self.session.execute(
            select(Playlist).where(Playlist.owner_id == owner_id, Playlist.name == name)
        )
        return result.scalar_one_or_none()

    async def get_owner_playlists(self, owner_id: UUID) -> list[Playlist]:
        result = await self.session.execute(
            select(Playlist)
            .where(Playlist.owner_id == owner_id)
            .order_by(Playlist.created_at.desc())
        )
        return list(result.scalars().all())

    async def add_video(self, playlist: Playlist, video: Video) -> Playlist:
        """Append a video unless it is already in the playlist."""
        if all(existing.id != video.id for existing in playlist.videos):
            playlist.videos.append(video)
            await self.session.flush()
        return playlist

    async def remove_video(self, playlist: Playlist, video_id: UUID) -> Playlist:
        """Remove a video from the playlist; a missing video is a no-op."""
        for existing in list(playlist.videos):
            if existing.id == video_id:
                playlist.videos.remove(existing)
        await self.session.flush()
        return playlist
