"""
Tweet repository for data access.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.models.tweet import Tweet
from videotube.shared.repositories.base import BaseRepository


class TweetRepository(BaseRepository[Tweet]):
    """Repository for Tweet entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tweet, session)

    async def get_owner_tweets(self, owner_id: UUID) -> list[Tweet]:
        result = await self.session.execute(
            select(Tweet).where(Tweet.owner_id == owner_id).order_by(Tweet.created_at.desc())
        )
        return list(result.scalars().all())
