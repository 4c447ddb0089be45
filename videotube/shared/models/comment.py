"""
Comment Entity Model

A comment left by a user on a video.
"""

import uuid

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from videotube.shared.models.base import Base, OwnedMixin, TimestampMixin


class Comment(Base, TimestampMixin, OwnedMixin):
    """
    Comment model.

    Attributes:
        id: Unique identifier (UUID v4)
        owner_id: Author of the comment
        video_id: Video the comment belongs to
        content: Comment text
    """

    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    video_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, video_id={self.video_id})>"
