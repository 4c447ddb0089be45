"""
WatchHistoryEntry Entity Model

One row per (user, video) the user has watched, newest first.

SAMPLE WATCH_HISTORY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1042                                                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ video_id         │ 770e8400-e29b-41d4-a716-446655440000                      │
│ watched_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

The integer id grows with every insert and breaks ties between entries
stamped with the same watched_at.
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from videotube.shared.models.base import Base


if TYPE_CHECKING:
    from videotube.shared.models.video import Video


class WatchHistoryEntry(Base):
    """
    WatchHistoryEntry model.

    Attributes:
        id: Autoincrement insertion order
        user_id: Owner of the history
        video_id: The watched video, at most once per user
        watched_at: When the video was (last) watched

    Relationships:
        video: The watched video (joined eagerly)
    """

    __tablename__ = "watch_history"

    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_watch_history_user_video"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    video_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
    )

    watched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    video: Mapped["Video"] = relationship("Video", lazy="joined")

    def __repr__(self) -> str:
        return f"<WatchHistoryEntry(user_id={self.user_id}, video_id={self.video_id})>"
