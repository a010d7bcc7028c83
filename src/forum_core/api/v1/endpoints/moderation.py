"""Moderation-related endpoints for the forum API."""

from __future__ import annotations

from fastapi import APIRouter

from forum_core.api.v1.dependencies import IdPath, ModeratorDep, SessionDep
from forum_core.schemas.comment import PendingCommentView
from forum_core.services.moderation import ModerationService

router = APIRouter(prefix="/moderation", tags=["moderation"])


@router.get("/pending", response_model=list[PendingCommentView])
async def get_pending_comments(
    db: SessionDep,
    _moderator: ModeratorDep,
) -> list[PendingCommentView]:
    """Get comments waiting for admission, newest first."""
    return ModerationService(db).list_pending()


@router.post("/comments/{comment_id}/admit")
async def admit_comment(
    comment_id: IdPath,
    _moderator: ModeratorDep,
    db: SessionDep,
) -> dict[str, int | str]:
    """Admit a pending comment; admitting twice is reported as a conflict."""
    ModerationService(db).admit(comment_id)
    return {"status": "admitted", "comment_id": comment_id}
