"""
Tweet Service

Short text posts on a user's channel.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import UserNotFoundError
from videotube.shared.models.enums import RelationKind, ResourceKind
from videotube.shared.models.tweet import Tweet
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.repositories.tweet_repository import TweetRepository
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.services.ownership_guard import OwnershipGuard, parse_identifier


class TweetService:
    """Service for tweet operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = TweetRepository(session)
        self.guard = OwnershipGuard(session)

    async def create(self, owner_id: UUID, content: str) -> Tweet:
        return await self.repo.create(owner_id=owner_id, content=content)

    async def list_user_tweets(self, user_id: Any) -> list[Tweet]:
        user_uuid = parse_identifier(user_id, "user")
        if not await UserRepository(self.session).exists(user_uuid):
            raise UserNotFoundError(str(user_uuid))
        return await self.repo.get_owner_tweets(user_uuid)

    async def update(self, tweet_id: Any, principal_id: UUID, content: str) -> Tweet:
        tweet = await self.guard.authorize(tweet_id, ResourceKind.TWEET, principal_id)
        return await self.repo.update_instance(tweet, content=content)

    async def delete(self, tweet_id: Any, principal_id: UUID) -> None:
        tweet = await self.guard.authorize(tweet_id, ResourceKind.TWEET, principal_id)
        await ToggleRelationRepository(self.session).delete_for_targets([tweet.id], RelationKind.TWEET_LIKE)
        await self.repo.delete_instance(tweet)
