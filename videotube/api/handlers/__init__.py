"""
API Handlers

Route handlers for the VideoTube API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer, and service errors
are rendered by the global exception handlers.
"""

from videotube.api.handlers import (
    comment_handler,
    dashboard_handler,
    health_handler,
    like_handler,
    playlist_handler,
    subscription_handler,
    tweet_handler,
    user_handler,
    video_handler,
)

__all__ = [
    "comment_handler",
    "dashboard_handler",
    "health_handler",
    "like_handler",
    "playlist_handler",
    "subscription_handler",
    "tweet_handler",
    "user_handler",
    "video_handler",
]
