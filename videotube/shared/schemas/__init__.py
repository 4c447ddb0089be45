"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, pagination, error responses
- user: User, session and channel schemas
- content: Video, playlist, tweet and comment schemas
- relation: Like/subscription toggle and dashboard schemas

Usage:
======
    from videotube.shared.schemas.user import UserCreate, UserResponse, AuthResponse
    from videotube.shared.schemas.common import ErrorResponse
"""

from videotube.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    SortParams,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from videotube.shared.schemas.content import (
    VideoCreate,
    VideoUpdate,
    VideoResponse,
    PlaylistCreate,
    PlaylistUpdate,
    PlaylistResponse,
    TweetRequest,
    TweetResponse,
    CommentRequest,
    CommentResponse,
)
from videotube.shared.schemas.user import (
    UserCreate,
    UserLogin,
    RefreshTokenRequest,
    ChangePasswordRequest,
    UserUpdate,
    UserResponse,
    ChannelSummary,
    TokenResponse,
    AuthResponse,
    ChannelProfileResponse,
    WatchHistoryItem,
)
from videotube.shared.schemas.relation import (
    LikeToggleResponse,
    SubscriptionToggleResponse,
    ChannelStatsResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "SortParams",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Content
    "VideoCreate",
    "VideoUpdate",
    "VideoResponse",
    "PlaylistCreate",
    "PlaylistUpdate",
    "PlaylistResponse",
    "TweetRequest",
    "TweetResponse",
    "CommentRequest",
    "CommentResponse",
    # User
    "UserCreate",
    "UserLogin",
    "RefreshTokenRequest",
    "ChangePasswordRequest",
    "UserUpdate",
    "UserResponse",
    "ChannelSummary",
    "TokenResponse",
    "AuthResponse",
    "ChannelProfileResponse",
    "WatchHistoryItem",
    # Relations
    "LikeToggleResponse",
    "SubscriptionToggleResponse",
    "ChannelStatsResponse",
]
