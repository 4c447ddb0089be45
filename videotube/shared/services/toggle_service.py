"""
Relation Toggle Service

Likes and subscriptions as idempotent two-state flips.

Toggle Algorithm:
=================
    toggle(subject, target, kind)
        │
        ├── target id malformed?              → InvalidIdentifierError
        ├── subscription to yourself?         → SelfReferenceDeniedError
        ├── target missing?                   → TargetNotFoundError
        │   (an unpublished video counts as missing to all but its owner)
        │
        ├── DELETE WHERE (subject, target, kind)
        │       row deleted  → DELETED
        │
        └── INSERT (subject, target, kind) in a SAVEPOINT
                inserted                      → CREATED
                unique violation (racing twin) → CREATED, still one row

Counts (likes on a video, subscribers of a channel) are row counts over
toggle_relations, never stored counters.

Usage:
======
    from videotube.shared.services.toggle_service import ToggleService

    service = ToggleService(db)
    outcome = await service.toggle(user.id, video_id, RelationKind.VIDEO_LIKE)
    # ToggleOutcome.CREATED, then ToggleOutcome.DELETED on the next call
"""

from typing import Any, Type
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import SelfReferenceDeniedError, TargetNotFoundError
from videotube.shared.core.logging import get_logger
from videotube.shared.models.base import Base
from videotube.shared.models.comment import Comment
from videotube.shared.models.enums import RelationKind, ToggleOutcome
from videotube.shared.models.tweet import Tweet
from videotube.shared.models.user import User
from videotube.shared.models.video import Video
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.repositories.video_repository import VideoRepository
from videotube.shared.services.ownership_guard import parse_identifier


logger = get_logger(__name__)

# kind → (target model, target label)
TARGETS: dict[RelationKind, tuple[Type[Base], str]] = {
    RelationKind.VIDEO_LIKE: (Video, "Video"),
    RelationKind.COMMENT_LIKE: (Comment, "Comment"),
    RelationKind.TWEET_LIKE: (Tweet, "Tweet"),
    RelationKind.SUBSCRIPTION: (User, "Channel"),
}


class ToggleService:
    """
    Service for like/subscription relations.

    Attributes:
        session: Database session
        repo: ToggleRelationRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ToggleRelationRepository(session)

    async def toggle(self, subject_id: UUID, target_id: Any, kind: RelationKind) -> ToggleOutcome:
        """
        Flip the relation between subject and target.

        Args:
            subject_id: Authenticated user
            target_id: Raw id of the video/comment/tweet/channel
            kind: Relation kind

        Returns:
            ToggleOutcome.CREATED if the relation now exists,
            ToggleOutcome.DELETED if it was removed

        Raises:
            InvalidIdentifierError: Malformed target_id
            SelfReferenceDeniedError: Subscribing to one's own channel
            TargetNotFoundError: Target does not exist
        """
        model, label = TARGETS[kind]
        target_uuid = parse_identifier(target_id, label.lower())

        if kind is RelationKind.SUBSCRIPTION and target_uuid == subject_id:
            raise SelfReferenceDeniedError()

        if kind is RelationKind.VIDEO_LIKE:
            target = await VideoRepository(self.session).get_visible(target_uuid, subject_id)
        else:
            target = await self.session.get(model, target_uuid)
        if target is None:
            raise TargetNotFoundError(label, str(target_uuid))

        if await self.repo.delete_relation(subject_id, target_uuid, kind):
            outcome = ToggleOutcome.DELETED
        else:
            # False means a concurrent twin inserted first; the row exists either way
            await self.repo.insert_if_absent(subject_id, target_uuid, kind)
            outcome = ToggleOutcome.CREATED

        logger.info(
            "Relation toggled",
            user_id=str(subject_id),
            target_id=str(target_uuid),
            kind=kind.value,
            outcome=outcome.value,
        )
        return outcome

    # ═══════════════════════════════════════════════════════════════════════════
    # READ SIDE
    # ═══════════════════════════════════════════════════════════════════════════

    async def has_relation(self, subject_id: UUID, target_id: UUID, kind: RelationKind) -> bool:
        return await self.repo.get_relation(subject_id, target_id, kind) is not None

    async def count(self, target_id: UUID, kind: RelationKind) -> int:
        return await self.repo.count_for_target(target_id, kind)

    async def liked_videos(self, user_id: UUID) -> list[Video]:
        """Videos the user liked, most recent like first."""
        video_ids = await self.repo.target_ids_for_subject(user_id, RelationKind.VIDEO_LIKE)
        videos = {video.id: video for video in await VideoRepository(self.session).get_by_ids(video_ids)}
        return [videos[video_id] for video_id in video_ids if video_id in videos]

    async def subscribers(self, channel_id: Any) -> list[User]:
        """Users subscribed to a channel."""
        channel_uuid = parse_identifier(channel_id, "channel")
        if await self.session.get(User, channel_uuid) is None:
            raise TargetNotFoundError("Channel", str(channel_uuid))

        user_ids = await self.repo.subject_ids_for_target(channel_uuid, RelationKind.SUBSCRIPTION)
        return await self._users_in_order(user_ids)

    async def subscribed_channels(self, user_id: UUID) -> list[User]:
        """Channels the user subscribes to."""
        channel_ids = await self.repo.target_ids_for_subject(user_id, RelationKind.SUBSCRIPTION)
        return await self._users_in_order(channel_ids)

    async def _users_in_order(self, user_ids: list[UUID]) -> list[User]:
        users = {user.id: user for user in await UserRepository(self.session).get_by_ids(user_ids)}
        return [users[user_id] for user_id in user_ids if user_id in users]
