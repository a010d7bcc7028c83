# src/forum_core/schemas/comment.py
"""Comment and vote Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import STORE_INT_MAX, STORE_INT_MIN


class CommentCreate(BaseModel):
    """Schema for posting a comment to a topic."""

    text: str = Field(..., min_length=1, max_length=10000)


class CommentResponse(BaseModel):
    """Schema for a bare comment row."""

    id: int
    text: str
    created_at: datetime
    author_id: int
    theme_id: int
    is_admitted: bool

    model_config = ConfigDict(from_attributes=True)


class CommentView(BaseModel):
    """Comment as rendered on a topic page."""

    id: int
    text: str
    created_at: datetime
    author_name: str
    author_id: int
    vote_total: int
    has_avatar: bool
    is_admitted: bool


class PendingCommentView(BaseModel):
    """Comment waiting in the moderation queue."""

    comment_id: int
    text: str
    created_at: datetime
    topic_id: int
    topic_title: str
    author_id: int
    author_name: str


class VoteCreate(BaseModel):
    """Schema for casting a vote on a comment."""

    vote: int = Field(
        ...,
        ge=STORE_INT_MIN,
        le=STORE_INT_MAX,
        description="Signed vote value; negative values count against",
    )


class VoteResponse(BaseModel):
    """Schema for a stored vote."""

    id: int
    comment_id: int
    voter_id: int
    vote: int

    model_config = ConfigDict(from_attributes=True)
