"""Data access layer for forum entities."""

from .forum_repo import ForumRepository

__all__ = ["ForumRepository"]
