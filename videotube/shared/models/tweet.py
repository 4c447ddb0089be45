"""
Tweet Entity Model

A short text post on a user's channel.
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from videotube.shared.models.base import Base, OwnedMixin, TimestampMixin


class Tweet(Base, TimestampMixin, OwnedMixin):
    """Tweet model: owner_id plus free-text content."""

    __tablename__ = "tweets"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Tweet(id={self.id}, owner_id={self.owner_id})>"
