"""
Like, subscription and dashboard schemas.
"""

from pydantic import BaseModel

from videotube.shared.models.enums import ToggleOutcome


class LikeToggleResponse(BaseModel):
    """Outcome of a like toggle."""

    status: ToggleOutcome
    likes_count: int


class SubscriptionToggleResponse(BaseModel):
    """Outcome of a subscription toggle: "subscribed" or "unsubscribed"."""

    status: str
    subscribers_count: int


class ChannelStatsResponse(BaseModel):
    """Dashboard totals for the caller's channel."""

    total_videos: int
    total_views: int
    total_subscribers: int
    total_likes: int
