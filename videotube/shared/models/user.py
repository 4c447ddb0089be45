"""
User Entity Model

Represents a registered principal: the identity every token, ownership
check and toggle relation refers to.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "chaiaurcode"                                             │
│ email            │ "user@example.com"                                        │
│ full_name        │ "Hitesh C"                                                │
│ password_hash    │ "$2b$10$..."                                              │
│ refresh_token    │ "eyJhbGciOi..."  (NULL after logout)                      │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from videotube.shared.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    User model representing a registered principal.

    Attributes:
        id: Unique identifier (UUID v4), immutable
        username: Unique, stored lowercased
        email: Unique, stored lowercased
        full_name: Display name
        password_hash: Bcrypt hash, replaced on password change
        refresh_token: The single currently valid refresh token, or NULL
        avatar_url: Object-store handle of the avatar image
        cover_image_url: Object-store handle of the cover image
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    full_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    cover_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Rotated on every login/refresh, cleared on logout
    refresh_token: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
