"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser, OptionalUser
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: User = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):

Usage:
======
    from videotube.api.dependencies import DbSession, CurrentUser

    @router.get("/tweets")
    async def my_tweets(db: DbSession, user: CurrentUser):
        return await TweetRepository(db).get_owner_tweets(user.id)
"""

from videotube.api.dependencies.database import (
    get_db,
    DbSession,
)
from videotube.api.dependencies.auth import (
    get_access_claims,
    get_current_user,
    get_optional_user,
    CurrentUser,
    OptionalUser,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_access_claims",
    "get_current_user",
    "get_optional_user",
    "CurrentUser",
    "OptionalUser",
]
