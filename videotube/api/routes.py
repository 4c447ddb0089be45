"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /users                  → Registration, session, account, channel, history
    /likes                  → Like toggles, liked videos
    /subscriptions          → Subscription toggle, subscriber lists
    /videos                 → Videos
    /playlists              → Playlists
    /tweets                 → Tweets
    /comments               → Comments
    /dashboard              → Channel stats

Usage:
======
    from videotube.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from videotube.api.handlers import (
    comment_handler,
    dashboard_handler,
    health_handler,
    like_handler,
    playlist_handler,
    subscription_handler,
    tweet_handler,
    user_handler,
    video_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Users, sessions and channels
    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    # Toggle relations
    app.include_router(
        like_handler.router,
        prefix="/likes",
        tags=["Likes"],
    )
    app.include_router(
        subscription_handler.router,
        prefix="/subscriptions",
        tags=["Subscriptions"],
    )

    # Owned content
    app.include_router(
        video_handler.router,
        prefix="/videos",
        tags=["Videos"],
    )
    app.include_router(
        playlist_handler.router,
        prefix="/playlists",
        tags=["Playlists"],
    )
    app.include_router(
        tweet_handler.router,
        prefix="/tweets",
        tags=["Tweets"],
    )
    app.include_router(
        comment_handler.router,
        prefix="/comments",
        tags=["Comments"],
    )

    app.include_router(
        dashboard_handler.router,
        prefix="/dashboard",
        tags=["Dashboard"],
    )
