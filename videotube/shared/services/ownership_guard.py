"""
Ownership Guard

The single authorization check in front of every mutation of an owned
resource (video, playlist, tweet, comment).

Check Order:
============
    1. resource_id is a well-formed UUID     else InvalidIdentifierError (400)
    2. the resource exists                   else NotFoundError          (404)
    3. resource.owner_id == principal_id     else AuthorizationError     (403)

On success the loaded resource is returned, so callers do not look it up
a second time. A resource without an owner is never authorized.

Usage:
======
    from videotube.shared.services.ownership_guard import OwnershipGuard

    guard = OwnershipGuard(db)
    playlist = await guard.authorize(playlist_id, ResourceKind.PLAYLIST, current_user.id)
    await db.delete(playlist)
"""

from typing import Any, Type
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from videotube.shared.core.exceptions import (
    AuthorizationError,
    InvalidIdentifierError,
    NotFoundError,
)
from videotube.shared.core.logging import get_logger
from videotube.shared.models.base import Base, HasOwner
from videotube.shared.models.comment import Comment
from videotube.shared.models.enums import ResourceKind
from videotube.shared.models.playlist import Playlist
from videotube.shared.models.tweet import Tweet
from videotube.shared.models.video import Video


logger = get_logger(__name__)

RESOURCE_MODELS: dict[ResourceKind, Type[Base]] = {
    ResourceKind.VIDEO: Video,
    ResourceKind.PLAYLIST: Playlist,
    ResourceKind.TWEET: Tweet,
    ResourceKind.COMMENT: Comment,
}


def parse_identifier(value: Any, label: str = "resource") -> UUID:
    """
    Validate and parse a resource identifier.

    Args:
        value: Raw identifier (path parameter, body field, ...)
        label: Resource name used in the error message

    Raises:
        InvalidIdentifierError: If value is not a UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidIdentifierError(label)


class OwnershipGuard:
    """Authorizes a principal against a resource's owner."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def authorize(
        self,
        resource_id: Any,
        resource_kind: ResourceKind,
        principal_id: UUID,
    ) -> Any:
        """
        Load a resource and make sure the principal owns it.

        Args:
            resource_id: Raw id of the resource
            resource_kind: Which kind of resource the id refers to
            principal_id: Id of the authenticated user

        Returns:
            The loaded resource instance

        Raises:
            InvalidIdentifierError: Malformed resource_id
            NotFoundError: No such resource
            AuthorizationError: principal_id does not own the resource
        """
        record_id = parse_identifier(resource_id, resource_kind.value)

        resource = await self.session.get(RESOURCE_MODELS[resource_kind], record_id)
        if resource is None:
            raise NotFoundError(resource_kind.value.capitalize(), str(record_id))

        owner_id = resource.owner_id if isinstance(resource, HasOwner) else None
        if owner_id is None or owner_id != principal_id:
            logger.warning(
                "Ownership check denied",
                resource_kind=resource_kind.value,
                resource_id=str(record_id),
                user_id=str(principal_id),
            )
            raise AuthorizationError(
                f"You do not have permission to modify this {resource_kind.value}"
            )

        return resource
