"""
Database Module

Database connectivity and session management for VideoTube.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession            one per request, commit on success,
        │                   rollback on exception
        ▼
    Repositories            UserRepository, ToggleRelationRepository, ...
        │
        ▼
    PostgreSQL

Usage in FastAPI:
=================
    from fastapi import Depends
    from videotube.shared.db import get_db
    from videotube.shared.repositories import UserRepository

    @app.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from videotube.shared.db.session import (
    get_db,
    check_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "check_db",  # Readiness check
    "init_db",  # Initialize database on app startup
    "close_db",  # Close database on app shutdown
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
