# src/forum_core/models/__init__.py
"""SQLAlchemy models for the forum core."""

from .comment import Comment, Like
from .role import Role, UserInRole
from .section import Section, Theme
from .user import UserProfile, UserProperty

__all__ = [
    "Comment", "Like",
    "Role", "UserInRole",
    "Section", "Theme",
    "UserProfile", "UserProperty",
]
