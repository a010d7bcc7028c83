# src/forum_core/api/v1/endpoints/topics.py
"""Topic-related endpoints for the forum API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from forum_core.api.v1.dependencies import (
    CurrentViewerDep,
    IdPath,
    ModeratorDep,
    SessionDep,
    ViewerDep,
)
from forum_core.core.settings import settings
from forum_core.models import Comment, Theme
from forum_core.schemas.comment import CommentCreate, CommentResponse, CommentView
from forum_core.schemas.common import DeletionResponse
from forum_core.schemas.forum import TopicCreate, TopicResponse, TopicSummary
from forum_core.services import content
from forum_core.services.aggregation import AggregationService
from forum_core.services.deletion import DeletionService, to_deletion_response
from forum_core.services.moderation import ModerationService

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("/recent", response_model=list[TopicSummary])
async def list_recent_topics(
    db: SessionDep,
    viewer: ViewerDep,
    limit: int = Query(settings.recent_topics_limit, ge=1, le=settings.recent_topics_max_limit),
) -> list[TopicSummary]:
    """List the most recently opened topics."""
    return AggregationService(db).list_recent_topics(limit, viewer_id=viewer.user_id)


@router.post("/", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
async def create_topic(
    topic_data: TopicCreate,
    viewer: CurrentViewerDep,
    db: SessionDep,
) -> Theme:
    """Open a new topic in a section."""
    return content.add_topic(
        db,
        section_id=topic_data.section_id,
        author_id=viewer.user_id,
        title=topic_data.title,
    )


@router.get("/{topic_id}", response_model=TopicResponse)
async def get_topic(topic_id: IdPath, db: SessionDep) -> Theme:
    """Get a specific topic by ID."""
    return content.get_topic(db, topic_id)


@router.delete("/{topic_id}", response_model=DeletionResponse)
async def delete_topic(
    topic_id: IdPath,
    _moderator: ModeratorDep,
    db: SessionDep,
) -> DeletionResponse:
    """Delete a topic together with its comments and their votes."""
    return to_deletion_response(DeletionService(db).delete_topic(topic_id))


@router.get("/{topic_id}/comments", response_model=list[CommentView])
async def list_topic_comments(
    topic_id: IdPath,
    db: SessionDep,
    viewer: ViewerDep,
) -> list[CommentView]:
    """List the comments of a topic that the viewer is allowed to see."""
    return ModerationService(db).list_comments(
        topic_id,
        viewer_has_full_access=viewer.has_full_access,
        viewer_id=viewer.user_id,
    )


@router.post(
    "/{topic_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    topic_id: IdPath,
    comment_data: CommentCreate,
    viewer: CurrentViewerDep,
    db: SessionDep,
) -> Comment:
    """Post a comment; it stays hidden from other members until admitted."""
    return content.add_comment(
        db,
        topic_id=topic_id,
        author_id=viewer.user_id,
        text=comment_data.text,
    )
