"""
Playlist Entity Model

An ordered, duplicate-free list of videos owned by one user.

SAMPLE PLAYLIST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 880e8400-e29b-41d4-a716-446655440000                      │
│ owner_id         │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Watch later"                                             │
│ description      │ "No description given"                                    │
└──────────────────────────────────────────────────────────────────────────────┘

Membership is stored in the playlist_videos junction table.
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, UniqueConstraint, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from videotube.shared.models.base import Base, OwnedMixin, TimestampMixin


if TYPE_CHECKING:
    from videotube.shared.models.video import Video


DEFAULT_PLAYLIST_DESCRIPTION = "No description given"


# Junction table: composite PK keeps a video at most once per playlist
playlist_videos = Table(
    "playlist_videos",
    Base.metadata,
    Column(
        "playlist_id",
        Uuid,
        ForeignKey("playlists.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "video_id",
        Uuid,
        ForeignKey("videos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "added_at",
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    ),
)


class Playlist(Base, TimestampMixin, OwnedMixin):
    """
    Playlist model.

    Attributes:
        id: Unique identifier (UUID v4)
        owner_id: The user who created the playlist
        name: Playlist name, unique per owner
        description: Free text

    Relationships:
        videos: Videos in the playlist (loaded eagerly with the playlist)
    """

    __tablename__ = "playlists"

    __table_args__ = (
        UniqueConstraint("owner_id", "name", name="uq_playlists_owner_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=DEFAULT_PLAYLIST_DESCRIPTION,
    )

    # selectin: the async session cannot lazy-load, and deleting a playlist
    # needs the collection to clear junction rows
    videos: Mapped[list["Video"]] = relationship(
        "Video",
        secondary=playlist_videos,
        lazy="selectin",
        order_by=playlist_videos.c.added_at,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Playlist(id={self.id}, name={self.name})>"
