# src/forum_core/schemas/__init__.py
"""
Pydantic schemas for forum result shapes and request payloads.

These schemas define the structure of data for serialization and validation.
"""

from .comment import (
    CommentCreate,
    CommentResponse,
    CommentView,
    PendingCommentView,
    VoteCreate,
    VoteResponse,
)
from .common import DeletionResponse, ErrorResponse
from .forum import (
    SectionCreate,
    SectionResponse,
    SectionSummary,
    ShortTopicInfo,
    TopicCreate,
    TopicResponse,
    TopicSummary,
)
from .user import PrivacySettings, PrivacySettingsUpdate, ProfileSummary

__all__ = [
    "CommentCreate", "CommentResponse", "CommentView", "PendingCommentView",
    "VoteCreate", "VoteResponse",
    "SectionCreate", "SectionResponse", "SectionSummary",
    "ShortTopicInfo", "TopicCreate", "TopicResponse", "TopicSummary",
    "DeletionResponse", "ErrorResponse",
    "PrivacySettings", "PrivacySettingsUpdate", "ProfileSummary",
]
