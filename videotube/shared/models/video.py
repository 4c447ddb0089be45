"""
Video Entity Model

A published video. The media itself lives in the object store; this row
only keeps the handles the store returned.

SAMPLE VIDEO RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ owner_id         │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "Async Python in 10 minutes"                              │
│ video_url        │ "https://media.example.com/v/abc.mp4"                     │
│ thumbnail_url    │ "https://media.example.com/t/abc.jpg"                     │
│ duration         │ 612.4                                                     │
│ views            │ 1042                                                      │
│ is_published     │ true                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid

from sqlalchemy import Boolean, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from videotube.shared.models.base import Base, OwnedMixin, TimestampMixin


class Video(Base, TimestampMixin, OwnedMixin):
    """
    Video model.

    Attributes:
        id: Unique identifier (UUID v4)
        owner_id: Publishing user
        title: Video title
        description: Video description
        video_url: Object-store handle of the media file
        thumbnail_url: Object-store handle of the thumbnail
        duration: Length in seconds
        views: View counter
        is_published: Whether the video is publicly listed
    """

    __tablename__ = "videos"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    video_url: Mapped[str] = mapped_column(Text, nullable=False)

    thumbnail_url: Mapped[str] = mapped_column(Text, nullable=False)

    duration: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Video(id={self.id}, owner_id={self.owner_id})>"
