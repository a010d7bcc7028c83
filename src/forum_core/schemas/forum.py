# src/forum_core/schemas/forum.py
"""Section and topic Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import STORE_INT_MAX


class SectionCreate(BaseModel):
    """Schema for creating a new section."""

    title: str = Field(..., min_length=1, max_length=200)


class SectionResponse(BaseModel):
    """Schema for a bare section row."""

    id: int
    title: str

    model_config = ConfigDict(from_attributes=True)


class SectionSummary(BaseModel):
    """Section listing entry with topic and comment counts."""

    section_id: int
    title: str
    topic_count: int
    admitted_comment_count: int
    pending_comment_count: int


class TopicCreate(BaseModel):
    """Schema for opening a new topic in a section."""

    section_id: int = Field(..., ge=1, le=STORE_INT_MAX)
    title: str = Field(..., min_length=1, max_length=300)


class TopicResponse(BaseModel):
    """Schema for a bare topic row."""

    id: int
    title: str
    created_at: datetime
    author_id: int
    section_id: int

    model_config = ConfigDict(from_attributes=True)


class ShortTopicInfo(BaseModel):
    """Topic entry used on a member's own topic list."""

    topic_id: int
    title: str
    created_at: datetime


class TopicSummary(BaseModel):
    """Topic listing entry with author and comment counts."""

    author_id: int
    author_name: str
    topic_id: int
    title: str
    created_at: datetime
    admitted_comment_count: int
    pending_comment_count: int
