"""
Tweet Handler
"""

from typing import List

from fastapi import APIRouter, Depends, status

from videotube.api.dependencies import CurrentUser
from videotube.api.dependencies.services import get_tweet_service
from videotube.shared.schemas.common import MessageResponse
from videotube.shared.schemas.content import TweetRequest, TweetResponse
from videotube.shared.services.tweet_service import TweetService


router = APIRouter()


@router.post(
    "",
    response_model=TweetResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_tweet(
    data: TweetRequest,
    current_user: CurrentUser,
    tweet_service: TweetService = Depends(get_tweet_service),
):
    return await tweet_service.create(current_user.id, data.content)


@router.get("/user/{user_id}", response_model=List[TweetResponse])
async def get_user_tweets(
    user_id: str,
    tweet_service: TweetService = Depends(get_tweet_service),
):
    return await tweet_service.list_user_tweets(user_id)


@router.patch("/{tweet_id}", response_model=TweetResponse)
async def update_tweet(
    tweet_id: str,
    data: TweetRequest,
    current_user: CurrentUser,
    tweet_service: TweetService = Depends(get_tweet_service),
):
    return await tweet_service.update(tweet_id, current_user.id, data.content)


@router.delete("/{tweet_id}", response_model=MessageResponse)
async def delete_tweet(
    tweet_id: str,
    current_user: CurrentUser,
    tweet_service: TweetService = Depends(get_tweet_service),
):
    await tweet_service.delete(tweet_id, current_user.id)
    return MessageResponse(message="Tweet deleted successfully")
