"""
VideoTube Backend

Identity, session and authorization core of a video sharing platform.

Package Structure:
==================
    videotube/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # Migrations
    alembic upgrade head

    # API Server
    uvicorn videotube.api.main:app --reload
"""
