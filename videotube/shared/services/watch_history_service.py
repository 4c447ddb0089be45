"""
Watch History Service

Bounded, de-duplicated, most-recent-first watch history per user.

Insert Policy:
==============
    record(user, video)
        1. drop the user's existing entry for the video (if any)
        2. insert a new entry stamped now            → it is the head
           (a racing twin already inserted it       → re-stamp that row)
        3. delete everything past the MAX_ENTRIES newest

Re-watching moves a video to the front instead of duplicating it, and a
full history evicts its oldest entry rather than rejecting the insert.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import NotFoundError
from videotube.shared.core.logging import get_logger
from videotube.shared.models.watch_history import WatchHistoryEntry
from videotube.shared.repositories.video_repository import VideoRepository
from videotube.shared.repositories.watch_history_repository import WatchHistoryRepository
from videotube.shared.services.ownership_guard import parse_identifier


logger = get_logger(__name__)

MAX_ENTRIES = 50


class WatchHistoryService:
    """Service for a user's watch history."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = WatchHistoryRepository(session)

    async def record(self, user_id: UUID, video_id: Any) -> list[WatchHistoryEntry]:
        """
        Put a video at the head of the user's history.

        Returns:
            The updated history, most recent first

        Raises:
            InvalidIdentifierError: Malformed video_id
            NotFoundError: Video does not exist or is an unpublished video of another user
        """
        video_uuid = parse_identifier(video_id, "video")
        if await VideoRepository(self.session).get_visible(video_uuid, user_id) is None:
            raise NotFoundError("Video", str(video_uuid))

        await self.repo.remove_video(user_id, video_uuid)
        await self.repo.add_or_touch(user_id, video_uuid, datetime.now(timezone.utc))
        evicted = await self.repo.truncate(user_id, MAX_ENTRIES)

        if evicted:
            logger.debug("Watch history truncated", user_id=str(user_id), evicted=evicted)

        return await self.repo.list_for_user(user_id)

    async def list(self, user_id: UUID) -> list[WatchHistoryEntry]:
        """The user's history, most recent first."""
        return await self.repo.list_for_user(user_id)
