# src/forum_core/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .comments import router as comments_router
from .moderation import router as moderation_router
from .sections import router as sections_router
from .topics import router as topics_router
from .users import router as users_router

__all__ = [
    "comments_router",
    "moderation_router",
    "sections_router",
    "topics_router",
    "users_router",
]
