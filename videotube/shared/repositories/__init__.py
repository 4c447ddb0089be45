"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]            ← Generic CRUD operations
         │
         ├── UserRepository              ← Lookups + refresh-token writes
         ├── ToggleRelationRepository    ← Likes/subscriptions, conditional writes
         ├── WatchHistoryRepository      ← Bounded history
         ├── VideoRepository
         ├── PlaylistRepository
         ├── TweetRepository
         └── CommentRepository

Usage Example:
==============
    from videotube.shared.repositories import UserRepository

    async def find_principal(db: AsyncSession, identifier: str):
        repo = UserRepository(db)
        return await repo.get_by_identifier(identifier)
"""

from videotube.shared.repositories.base import BaseRepository
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.repositories.watch_history_repository import WatchHistoryRepository
from videotube.shared.repositories.video_repository import VideoRepository
from videotube.shared.repositories.playlist_repository import PlaylistRepository
from videotube.shared.repositories.tweet_repository import TweetRepository
from videotube.shared.repositories.comment_repository import CommentRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ToggleRelationRepository",
    "WatchHistoryRepository",
    "VideoRepository",
    "PlaylistRepository",
    "TweetRepository",
    "CommentRepository",
]
