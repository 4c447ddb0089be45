"""
Shared Module

Contains code shared across the application:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer (tokens, ownership, toggles, content)
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── migrations/     ← Alembic environment and revisions
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Password hashing, JWT helpers

Usage:
======
    from videotube.shared.models import User, ToggleRelation
    from videotube.shared.repositories import UserRepository
    from videotube.shared.services import AuthService, TokenService
    from videotube.shared.schemas import UserCreate, AuthResponse
    from videotube.shared.core import logger, VideoTubeException
"""
