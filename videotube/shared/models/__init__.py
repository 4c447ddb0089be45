"""
VideoTube SQLAlchemy Models

This package contains all database models for the VideoTube application.

Model Hierarchy:
================
    User                       ← the principal
       ├── Video               (owner_id)
       ├── Playlist            (owner_id) ── playlist_videos ── Video
       ├── Tweet               (owner_id)
       ├── Comment             (owner_id, video_id)
       ├── ToggleRelation      (subject_id → target_id, kind)
       └── WatchHistoryEntry   (user_id, video_id)

Models Overview:
================
- Base: Base class and mixins (timestamps, ownership)
- User: Registered principal with its current refresh token
- Video / Playlist / Tweet / Comment: Owned resources
- ToggleRelation: Likes and subscriptions (row existence = state)
- WatchHistoryEntry: Bounded most-recent-first history

Usage:
======
    from videotube.shared.models import User, Video, ToggleRelation
"""

from videotube.shared.models.base import Base, TimestampMixin, OwnedMixin, HasOwner
from videotube.shared.models.enums import RelationKind, ToggleOutcome, ResourceKind
from videotube.shared.models.user import User
from videotube.shared.models.video import Video
from videotube.shared.models.playlist import Playlist, playlist_videos
from videotube.shared.models.tweet import Tweet
from videotube.shared.models.comment import Comment
from videotube.shared.models.toggle_relation import ToggleRelation
from videotube.shared.models.watch_history import WatchHistoryEntry

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "OwnedMixin",
    "HasOwner",
    # Enums
    "RelationKind",
    "ToggleOutcome",
    "ResourceKind",
    # Models
    "User",
    "Video",
    "Playlist",
    "playlist_videos",
    "Tweet",
    "Comment",
    "ToggleRelation",
    "WatchHistoryEntry",
]
