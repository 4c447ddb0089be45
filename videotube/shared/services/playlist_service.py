"""
Playlist Service

Business logic for playlists. Names are unique per owner; every
mutation goes through the OwnershipGuard.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import (
    DuplicateResourceError,
    NotFoundError,
    UserNotFoundError,
)
from videotube.shared.core.logging import get_logger
from videotube.shared.models.enums import ResourceKind
from videotube.shared.models.playlist import DEFAULT_PLAYLIST_DESCRIPTION, Playlist
from videotube.shared.repositories.playlist_repository import PlaylistRepository
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.repositories.video_repository import VideoRepository
from videotube.shared.services.ownership_guard import OwnershipGuard, parse_identifier


logger = get_logger(__name__)


class PlaylistService:
    """Service for playlist operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = PlaylistRepository(session)
        self.guard = OwnershipGuard(session)

    async def create(
        self,
        owner_id: UUID,
        name: str,
        description: Optional[str] = None,
    ) -> Playlist:
        """
        Create a playlist.

        Raises:
            DuplicateResourceError: Owner already has a playlist with this name
        """
        name = name.strip()
        if await self.repo.get_by_owner_and_name(owner_id, name):
            raise DuplicateResourceError("Playlist with same name already exists")

        playlist = await self.repo.create(
            owner_id=owner_id,
            name=name,
            description=description or DEFAULT_PLAYLIST_DESCRIPTION,
            videos=[],
        )
        logger.info("Playlist created", playlist_id=str(playlist.id), user_id=str(owner_id))
        return playlist

    async def get_playlist(self, playlist_id: Any) -> Playlist:
        playlist_uuid = parse_identifier(playlist_id, "playlist")
        playlist = await self.repo.get(playlist_uuid)
        if playlist is None:
            raise NotFoundError("Playlist", str(playlist_uuid))
        return playlist

    async def list_user_playlists(self, user_id: Any) -> list[Playlist]:
        user_uuid = parse_identifier(user_id, "user")
        if not await UserRepository(self.session).exists(user_uuid):
            raise UserNotFoundError(str(user_uuid))
        return await self.repo.get_owner_playlists(user_uuid)

    async def add_video(self, playlist_id: Any, video_id: Any, principal_id: UUID) -> Playlist:
        """Add a video to an owned playlist. Adding it twice is a no-op."""
        playlist = await self.guard.authorize(playlist_id, ResourceKind.PLAYLIST, principal_id)

        video_uuid = parse_identifier(video_id, "video")
        video = await VideoRepository(self.session).get_visible(video_uuid, principal_id)
        if video is None:
            raise NotFoundError("Video", str(video_uuid))

        return await self.repo.add_video(playlist, video)

    async def remove_video(self, playlist_id: Any, video_id: Any, principal_id: UUID) -> Playlist:
        playlist = await self.guard.authorize(playlist_id, ResourceKind.PLAYLIST, principal_id)
        return await self.repo.remove_video(playlist, parse_identifier(video_id, "video"))

    async def update(
        self,
        playlist_id: Any,
        principal_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Playlist:
        """
        Rename or re-describe an owned playlist.

        Raises:
            DuplicateResourceError: The new name is taken by another playlist of the owner
        """
        playlist = await self.guard.authorize(playlist_id, ResourceKind.PLAYLIST, principal_id)

        if name is not None:
            name = name.strip()
            existing = await self.repo.get_by_owner_and_name(principal_id, name)
            if existing is not None and existing.id != playlist.id:
                raise DuplicateResourceError("Playlist with same name already exists")

        return await self.repo.update_instance(playlist, name=name, description=description)

    async def delete(self, playlist_id: Any, principal_id: UUID) -> None:
        playlist = await self.guard.authorize(playlist_id, ResourceKind.PLAYLIST, principal_id)
        await self.repo.delete_instance(playlist)
        logger.info("Playlist deleted", playlist_id=str(playlist.id), user_id=str(principal_id))
