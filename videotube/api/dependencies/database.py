"""
Database Dependency

FastAPI dependency for database sessions.

get_db (from videotube.shared.db) commits when the handler returns and
rolls back when it raises. Tests swap it out through
app.dependency_overrides[get_db].

Usage:
======
    from videotube.api.dependencies.database import DbSession

    @router.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: DbSession):
        return await UserRepository(db).get(user_id)
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.db import get_db

__all__ = ["get_db", "DbSession"]


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
