"""
ToggleRelation Entity Model

Join record behind every like and subscription.

The row's existence IS the boolean state: a like is "on" while the row
exists and "off" once it is deleted. No false rows are ever stored, so
like/subscriber counts are plain row counts.

SAMPLE TOGGLE_RELATION RECORDS:
┌──────────────────────────────────────────────────────────────────────────────┐
│ subject_id  │ 550e8400-...  (user who liked / subscribed)                    │
│ target_id   │ 770e8400-...  (video, comment, tweet or channel user)          │
│ kind        │ VIDEO_LIKE                                                     │
├──────────────────────────────────────────────────────────────────────────────┤
│ subject_id  │ 550e8400-...                                                   │
│ target_id   │ 660e8400-...  (channel = another user's id)                    │
│ kind        │ SUBSCRIPTION                                                   │
└──────────────────────────────────────────────────────────────────────────────┘

Uniqueness:
===========
UNIQUE (subject_id, target_id, kind) is enforced by the database. Two
concurrent "like" requests for the same tuple can race past a read, but
only one INSERT can succeed.
"""

import uuid

from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Index, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from videotube.shared.models.base import Base, TimestampMixin
from videotube.shared.models.enums import RelationKind


class ToggleRelation(Base, TimestampMixin):
    """
    ToggleRelation model - a like or a subscription.

    target_id has no foreign key: depending on kind it points into videos,
    comments, tweets or users. The toggle service checks the target exists
    before creating a row.

    Attributes:
        id: Unique identifier (UUID v4)
        subject_id: The user performing the like/subscription
        target_id: The liked entity or the subscribed channel
        kind: RelationKind
    """

    __tablename__ = "toggle_relations"

    __table_args__ = (
        UniqueConstraint(
            "subject_id",
            "target_id",
            "kind",
            name="uq_toggle_relations_subject_target_kind",
        ),
        Index("ix_toggle_relations_target_kind", "target_id", "kind"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    subject_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    target_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
    )

    kind: Mapped[RelationKind] = mapped_column(
        SAEnum(RelationKind, name="relation_kind"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<ToggleRelation(subject_id={self.subject_id}, "
            f"target_id={self.target_id}, kind={self.kind.value})>"
        )
