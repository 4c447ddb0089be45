"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in VideoTube.
It includes the declarative base, the timestamp mixin, and the ownership
mixin shared by every resource a user can create.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── TimestampMixin   ← Automatic created_at/updated_at
       │
       └── OwnedMixin       ← owner_id → users.id (fixed at creation)

    HasOwner                ← Capability protocol the Ownership Guard is generic over

Usage:
======
    from videotube.shared.models.base import Base, TimestampMixin, OwnedMixin

    class Playlist(Base, TimestampMixin, OwnedMixin):
        __tablename__ = "playlists"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
"""

from datetime import datetime, timezone
from typing import Optional, Protocol, runtime_checkable
import uuid

from sqlalchemy import DateTime, ForeignKey, Uuid, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application should inherit from this class either
    directly or together with the mixins below.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


class OwnedMixin:
    """
    Mixin for resources owned by a single user.

    The owner is recorded at creation and never reassigned; repositories
    do not expose owner_id as an updatable field.
    """

    owner_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )


@runtime_checkable
class HasOwner(Protocol):
    """Anything exposing the id of the user that owns it."""

    owner_id: Optional[uuid.UUID]
