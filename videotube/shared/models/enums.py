"""
Enums used across the application.
"""

from enum import Enum


class RelationKind(str, Enum):
    """
    Kind of a toggle relation.

    The kind also decides which table the relation's target lives in.
    """

    VIDEO_LIKE = "video-like"
    COMMENT_LIKE = "comment-like"
    TWEET_LIKE = "tweet-like"
    SUBSCRIPTION = "subscription"

    @property
    def is_like(self) -> bool:
        return self is not RelationKind.SUBSCRIPTION


class ToggleOutcome(str, Enum):
    """Result of flipping a toggle relation."""

    CREATED = "created"
    DELETED = "deleted"


class ResourceKind(str, Enum):
    """Owned resource kinds guarded by the Ownership Guard."""

    VIDEO = "video"
    PLAYLIST = "playlist"
    TWEET = "tweet"
    COMMENT = "comment"
