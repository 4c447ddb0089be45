"""
Playlist Handler

Playlist CRUD. Every mutation is owner-only.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from videotube.api.dependencies import CurrentUser
from videotube.api.dependencies.services import get_playlist_service
from videotube.shared.schemas.common import MessageResponse
from videotube.shared.schemas.content import PlaylistCreate, PlaylistResponse, PlaylistUpdate
from videotube.shared.services.playlist_service import PlaylistService


router = APIRouter()


@router.post(
    "",
    response_model=PlaylistResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_playlist(
    data: PlaylistCreate,
    current_user: CurrentUser,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    """
    Create a playlist.

    Raises:
        409: The caller already has a playlist with this name
    """
    return await playlist_service.create(current_user.id, data.name, data.description)


@router.get("/user/{user_id}", response_model=List[PlaylistResponse])
async def get_user_playlists(
    user_id: str,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    return await playlist_service.list_user_playlists(user_id)


@router.get("/{playlist_id}", response_model=PlaylistResponse)
async def get_playlist(
    playlist_id: str,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    return await playlist_service.get_playlist(playlist_id)


@router.patch("/{playlist_id}", response_model=PlaylistResponse)
async def update_playlist(
    playlist_id: str,
    data: PlaylistUpdate,
    current_user: CurrentUser,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    return await playlist_service.update(
        playlist_id,
        current_user.id,
        name=data.name,
        description=data.description,
    )


@router.delete("/{playlist_id}", response_model=MessageResponse)
async def delete_playlist(
    playlist_id: str,
    current_user: CurrentUser,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    """
    Delete a playlist.

    Raises:
        400: Malformed id
        403: Caller does not own the playlist
        404: Playlist not found
    """
    await playlist_service.delete(playlist_id, current_user.id)
    return MessageResponse(message="Playlist deleted successfully")


@router.post("/{playlist_id}/videos/{video_id}", response_model=PlaylistResponse)
async def add_video_to_playlist(
    playlist_id: str,
    video_id: str,
    current_user: CurrentUser,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    return await playlist_service.add_video(playlist_id, video_id, current_user.id)


@router.delete("/{playlist_id}/videos/{video_id}", response_model=PlaylistResponse)
async def remove_video_from_playlist(
    playlist_id: str,
    video_id: str,
    current_user: CurrentUser,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    return await playlist_service.remove_video(playlist_id, video_id, current_user.id)
