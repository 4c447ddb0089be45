"""
Comment Handler

Comments live under their video; edits and deletes address the comment
itself (/comments/c/{comment_id}) and are author-only.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from videotube.api.dependencies import CurrentUser, OptionalUser
from videotube.api.dependencies.services import get_comment_service
from videotube.shared.schemas.common import MessageResponse, PaginationParams
from videotube.shared.schemas.content import CommentRequest, CommentResponse
from videotube.shared.services.comment_service import CommentService


router = APIRouter()


@router.get("/{video_id}", response_model=List[CommentResponse])
async def get_video_comments(
    video_id: str,
    viewer: OptionalUser,
    pagination: PaginationParams = Depends(),
    comment_service: CommentService = Depends(get_comment_service),
):
    """Comments on a video, newest first."""
    return await comment_service.list_video_comments(
        video_id,
        viewer.id if viewer else None,
        offset=pagination.offset,
        limit=pagination.limit,
    )


@router.post(
    "/{video_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    video_id: str,
    data: CommentRequest,
    current_user: CurrentUser,
    comment_service: CommentService = Depends(get_comment_service),
):
    return await comment_service.add(video_id, current_user.id, data.content)


@router.patch("/c/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    data: CommentRequest,
    current_user: CurrentUser,
    comment_service: CommentService = Depends(get_comment_service),
):
    return await comment_service.update(comment_id, current_user.id, data.content)


@router.delete("/c/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: str,
    current_user: CurrentUser,
    comment_service: CommentService = Depends(get_comment_service),
):
    await comment_service.delete(comment_id, current_user.id)
    return MessageResponse(message="Comment deleted successfully")
