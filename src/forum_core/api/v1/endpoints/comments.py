# src/forum_core/api/v1/endpoints/comments.py
"""Comment and vote endpoints for the forum API."""

from __future__ import annotations

from fastapi import APIRouter, status

from forum_core.api.v1.dependencies import CurrentViewerDep, IdPath, ModeratorDep, SessionDep
from forum_core.models import Like
from forum_core.schemas.comment import VoteCreate, VoteResponse
from forum_core.schemas.common import DeletionResponse
from forum_core.services import content
from forum_core.services.deletion import DeletionService, to_deletion_response

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post(
    "/{comment_id}/votes",
    response_model=VoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    comment_id: IdPath,
    vote_data: VoteCreate,
    viewer: CurrentViewerDep,
    db: SessionDep,
) -> Like:
    """Cast a signed vote on a comment."""
    return content.cast_vote(
        db,
        comment_id=comment_id,
        voter_id=viewer.user_id,
        vote=vote_data.vote,
    )


@router.delete("/{comment_id}", response_model=DeletionResponse)
async def delete_comment(
    comment_id: IdPath,
    _moderator: ModeratorDep,
    db: SessionDep,
) -> DeletionResponse:
    """Delete a comment and its votes."""
    return to_deletion_response(DeletionService(db).delete_comment(comment_id))
