"""
ToggleRelation repository for data access.

Writes are phrased as conditional statements so that correctness does
not depend on a read that may be stale by the time the write lands:

- delete_relation(): DELETE ... WHERE (subject, target, kind); rowcount
  says whether a row existed.
- insert_if_absent(): INSERT inside a SAVEPOINT; a unique-constraint
  violation means another request created the same row first.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from videotube.shared.models.enums import RelationKind
from videotube.shared.models.toggle_relation import ToggleRelation
from videotube.shared.repositories.base import BaseRepository


class ToggleRelationRepository(BaseRepository[ToggleRelation]):
    """Repository for ToggleRelation entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ToggleRelation, session)

    async def get_relation(
        self,
        subject_id: UUID,
        target_id: UUID,
        kind: RelationKind,
    ) -> Optional[ToggleRelation]:
        """Fetch the relation row for a full (subject, target, kind) tuple."""
        result = await self.session.execute(
            select(ToggleRelation).where(
                ToggleRelation.subject_id == subject_id,
                ToggleRelation.target_id == target_id,
                ToggleRelation.kind == kind,
            )
        )
        return result.scalar_one_or_none()

    async def delete_relation(
        self,
        subject_id: UUID,
        target_id: UUID,
        kind: RelationKind,
    ) -> bool:
        """
        Delete the relation for the tuple if present.

        Returns:
            True if a row was deleted
        """
        result = await self.session.execute(
            delete(ToggleRelation)
            .where(
                ToggleRelation.subject_id == subject_id,
                ToggleRelation.target_id == target_id,
                ToggleRelation.kind == kind,
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount > 0

    async def insert_if_absent(
        self,
        subject_id: UUID,
        target_id: UUID,
        kind: RelationKind,
    ) -> bool:
        """
        Insert the relation unless the unique constraint rejects it.

        The SAVEPOINT keeps a constraint violation from aborting the
        surrounding request transaction.

        Returns:
            True if this call inserted the row, False if it already existed
        """
        try:
            async with self.session.begin_nested():
                self.session.add(
                    ToggleRelation(subject_id=subject_id, target_id=target_id, kind=kind)
                )
        except IntegrityError:
            return False
        return True

    async def delete_for_targets(self, target_ids: list[UUID], kind: RelationKind) -> int:
        """
        Delete every relation of one kind pointing at the given targets.

        Called when the targets themselves are deleted, since target_id
        carries no foreign key.

        Returns:
            Number of deleted relations
        """
        if not target_ids:
            return 0
        result = await self.session.execute(
            delete(ToggleRelation)
            .where(ToggleRelation.target_id.in_(target_ids), ToggleRelation.kind == kind)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount

    async def count_for_target(self, target_id: UUID, kind: RelationKind) -> int:
        """Count relations pointing at a target (likes on a video, subscribers of a channel)."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(ToggleRelation)
            .where(ToggleRelation.target_id == target_id, ToggleRelation.kind == kind)
        )
        return result.scalar() or 0

    async def count_for_subject(self, subject_id: UUID, kind: RelationKind) -> int:
        """Count relations a subject holds (channels a user subscribes to)."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(ToggleRelation)
            .where(ToggleRelation.subject_id == subject_id, ToggleRelation.kind == kind)
        )
        return result.scalar() or 0

    async def count_for_targets(self, target_ids: list[UUID], kind: RelationKind) -> int:
        """Count relations of one kind across several targets."""
        if not target_ids:
            return 0
        result = await self.session.execute(
            select(sql_count())
            .select_from(ToggleRelation)
            .where(ToggleRelation.target_id.in_(target_ids), ToggleRelation.kind == kind)
        )
        return result.scalar() or 0

    async def target_ids_for_subject(self, subject_id: UUID, kind: RelationKind) -> list[UUID]:
        """Targets a subject is related to, newest relation first."""
        result = await self.session.execute(
            select(ToggleRelation.target_id)
            .where(ToggleRelation.subject_id == subject_id, ToggleRelation.kind == kind)
            .order_by(ToggleRelation.created_at.desc())
        )
        return list(result.scalars().all())

    async def subject_ids_for_target(self, target_id: UUID, kind: RelationKind) -> list[UUID]:
        """Subjects related to a target (subscribers of a channel), newest first."""
        result = await self.session.execute(
            select(ToggleRelation.subject_id)
            .where(ToggleRelation.target_id == target_id, ToggleRelation.kind == kind)
            .order_by(ToggleRelation.created_at.desc())
        )
        return list(result.scalars().all())
