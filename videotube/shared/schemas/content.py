"""
Content-related Pydantic schemas: videos, playlists, tweets, comments.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from videotube.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# VIDEOS
# ═══════════════════════════════════════════════════════════════════════════════


class VideoCreate(BaseModel):
    """Request to publish a video whose files are already in the object store."""

    title: str = Field(min_length=1, max_length=255)
    description: str = Field("", description="Video description")
    video_url: str = Field(min_length=1, description="Object-store handle of the media file")
    thumbnail_url: str = Field(min_length=1, description="Object-store handle of the thumbnail")
    duration: float = Field(0.0, ge=0, description="Length in seconds")


class VideoUpdate(BaseModel):
    """Request to update video metadata."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    thumbnail_url: Optional[str] = Field(None, min_length=1)


class VideoResponse(BaseSchema):
    """Response for a video."""

    id: UUID
    owner_id: Optional[UUID] = None
    title: str
    description: str
    video_url: str
    thumbnail_url: str
    duration: float
    views: int
    is_published: bool
    created_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# PLAYLISTS
# ═══════════════════════════════════════════════════════════════════════════════


class PlaylistCreate(BaseModel):
    """Request to create a playlist."""

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None


class PlaylistUpdate(BaseModel):
    """Request to update a playlist."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class PlaylistResponse(BaseSchema):
    """Response for a playlist with its videos."""

    id: UUID
    owner_id: Optional[UUID] = None
    name: str
    description: str
    videos: List[VideoResponse] = []
    created_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# TWEETS & COMMENTS
# ═══════════════════════════════════════════════════════════════════════════════


class TweetRequest(BaseModel):
    """Request to create or edit a tweet."""

    content: str = Field(min_length=1, max_length=280)


class TweetResponse(BaseSchema):
    id: UUID
    owner_id: Optional[UUID] = None
    content: str
    created_at: datetime


class CommentRequest(BaseModel):
    """Request to add or edit a comment."""

    content: str = Field(min_length=1)


class CommentResponse(BaseSchema):
    id: UUID
    video_id: UUID
    owner_id: Optional[UUID] = None
    content: str
    created_at: datetime
