"""
Shared test fixtures.

Every test gets its own SQLite file database. The API client runs the
real application over ASGI with get_db pointed at that database.
"""

import os

# Settings are read at import time
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./videotube-test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("COOKIE_SECURE", "true")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret-with-enough-entropy")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret-with-enough-entropy")

from typing import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from videotube.api.main import app
from videotube.shared.db import get_db
from videotube.shared.models import Base, User, Video
from videotube.shared.services.auth_service import AuthService
from videotube.shared.services.video_service import VideoService


PASSWORD = "correct-horse-battery"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'videotube.db'}")

    # pysqlite's own transaction handling breaks SAVEPOINT; emit BEGIN ourselves
    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, _record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session) -> Callable[..., Awaitable[User]]:
    """Register a user directly through the service layer."""

    async def _make_user(username: str, password: str = PASSWORD) -> User:
        user = await AuthService(db_session).register_user(
            full_name=username.title(),
            username=username,
            email=f"{username}@example.com",
            password=password,
        )
        await db_session.commit()
        return user

    return _make_user


@pytest.fixture
def make_video(db_session) -> Callable[..., Awaitable[Video]]:
    async def _make_video(owner: User, title: str = "First upload") -> Video:
        video = await VideoService(db_session).publish(
            owner_id=owner.id,
            title=title,
            video_url="videos/first.mp4",
            thumbnail_url="thumbnails/first.png",
            duration=12.5,
        )
        await db_session.commit()
        return video

    return _make_video


@pytest.fixture
def login(client) -> Callable[..., Awaitable]:
    """Log in over the API; the client's cookie jar keeps the session."""

    async def _login(username: str, password: str = PASSWORD):
        return await client.post(
            "/users/login",
            json={"username": username, "password": password},
        )

    return _login
