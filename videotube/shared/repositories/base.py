"""
Base Repository

Generic data access shared by every entity repository.

What This Provides:
===================
- get(id)            → One row by primary key
- get_by_ids(ids)    → Many rows in a single IN query (order not guaranteed)
- exists(id)         → Row check without loading the row
- create(**fields)   → Insert, flush, and load server defaults
- update_instance()  → Partial update of a loaded row; id / owner_id / created_at are never written
- delete_instance()  → Delete a loaded row

Generic Type Pattern:
=====================
    class VideoRepository(BaseRepository[Video]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Video, session)

    repo = VideoRepository(db)
    video = await repo.get(video_id)  # Optional[Video]

flush() vs commit():
====================
Repository methods only flush(). The request-scoped get_db() dependency
commits after the handler returns, or rolls back if it raised, so one
request is one transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from videotube.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)

# Columns that are fixed at creation
IMMUTABLE_FIELDS = frozenset({"id", "owner_id", "created_at"})


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one mapped model.

    Attributes:
        model: The SQLAlchemy model class
        session: The request's async session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by primary key.

        Goes through the session identity map first, so a row this
        session already holds is returned without a query.
        """
        return await self.session.get(self.model, record_id)

    async def get_by_ids(self, ids: list[UUID]) -> list[ModelType]:
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.unique().scalars().all())

    async def exists(self, record_id: UUID) -> bool:
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new row.

        Flushes for the generated id and refreshes to pick up server-side
        defaults (created_at, updated_at), which cannot be lazy-loaded
        later under asyncio.

        Example:
            playlist = await repo.create(owner_id=user_id, name="Watch later", videos=[])
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update_instance(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """
        Apply a partial update to a loaded row.

        None values are skipped. Immutable columns are ignored even when
        passed explicitly.
        """
        for field, value in kwargs.items():
            if field in IMMUTABLE_FIELDS:
                continue
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete_instance(self, instance: ModelType) -> None:
        await self.session.delete(instance)
        await self.session.flush()
