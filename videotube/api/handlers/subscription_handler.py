"""
Subscription Handler

Channel subscription toggle and subscriber lists.
"""

from typing import List

from fastapi import APIRouter, Depends

from videotube.api.dependencies import CurrentUser
from videotube.api.dependencies.services import get_toggle_service
from videotube.shared.models.enums import RelationKind, ToggleOutcome
from videotube.shared.schemas.relation import SubscriptionToggleResponse
from videotube.shared.schemas.user import ChannelSummary
from videotube.shared.services.ownership_guard import parse_identifier
from videotube.shared.services.toggle_service import ToggleService


router = APIRouter()


@router.post("/toggle/{channel_id}", response_model=SubscriptionToggleResponse)
async def toggle_subscription(
    channel_id: str,
    current_user: CurrentUser,
    toggle_service: ToggleService = Depends(get_toggle_service),
):
    """
    Subscribe to or unsubscribe from a channel.

    Raises:
        400: Malformed id, or the caller's own channel
        404: Channel not found
    """
    outcome = await toggle_service.toggle(current_user.id, channel_id, RelationKind.SUBSCRIPTION)
    subscribers_count = await toggle_service.count(
        parse_identifier(channel_id, "channel"), RelationKind.SUBSCRIPTION
    )
    return SubscriptionToggleResponse(
        status="subscribed" if outcome is ToggleOutcome.CREATED else "unsubscribed",
        subscribers_count=subscribers_count,
    )


@router.get("/channel/{channel_id}", response_model=List[ChannelSummary])
async def get_channel_subscribers(
    channel_id: str,
    current_user: CurrentUser,
    toggle_service: ToggleService = Depends(get_toggle_service),
):
    """Users subscribed to a channel."""
    return await toggle_service.subscribers(channel_id)


@router.get("/subscribed", response_model=List[ChannelSummary])
async def get_subscribed_channels(
    current_user: CurrentUser,
    toggle_service: ToggleService = Depends(get_toggle_service),
):
    """Channels the caller subscribes to."""
    return await toggle_service.subscribed_channels(current_user.id)
