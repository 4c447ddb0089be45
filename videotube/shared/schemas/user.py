"""
User Schemas

Request/response models for user, session and channel endpoints.

Responses never carry password_hash or the stored refresh_token; tokens
only appear in the login/refresh responses that mint them.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, model_validator

from videotube.shared.schemas.common import BaseSchema
from videotube.shared.schemas.content import VideoResponse


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """Schema for user registration."""

    full_name: str = Field(min_length=1, max_length=255)
    username: str = Field(
        min_length=3,
        max_length=64,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Unique handle, stored lowercased",
    )
    email: EmailStr
    password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )
    avatar_url: Optional[str] = Field(None, description="Object-store handle of the avatar")
    cover_image_url: Optional[str] = Field(None, description="Object-store handle of the cover image")


class UserLogin(BaseModel):
    """Schema for user login. Either username or email identifies the user."""

    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(min_length=1)

    @model_validator(mode="after")
    def require_identifier(self) -> "UserLogin":
        if not (self.username or self.email):
            raise ValueError("username or email is required")
        return self

    @property
    def identifier(self) -> str:
        return self.username or self.email or ""


class RefreshTokenRequest(BaseModel):
    """Body fallback for clients that cannot send cookies."""

    refresh_token: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    """Schema for password change."""

    old_password: str = Field(min_length=1)
    new_password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )


class UserUpdate(BaseModel):
    """Schema for account update. Omitted fields stay unchanged."""

    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: UUID
    username: str
    email: str
    full_name: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    created_at: datetime


class ChannelSummary(BaseSchema):
    """Compact user view used in subscriber lists."""

    id: UUID
    username: str
    full_name: str
    avatar_url: Optional[str] = None


class TokenResponse(BaseModel):
    """Schema for a freshly minted token pair."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # access token lifetime, seconds


class AuthResponse(TokenResponse):
    """Schema for login response."""

    user: UserResponse


class ChannelProfileResponse(BaseSchema):
    """Public channel profile."""

    id: UUID
    username: str
    full_name: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    subscribers_count: int
    channels_subscribed_to_count: int
    is_subscribed: bool


class WatchHistoryItem(BaseSchema):
    """One watch history entry."""

    video: VideoResponse
    watched_at: datetime
