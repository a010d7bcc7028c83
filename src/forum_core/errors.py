# src/forum_core/errors.py
"""Error taxonomy shared by the forum services.

Every failure a service reports is a subclass of :class:`ForumError` so that
callers (and the HTTP layer) can tell "nothing to do" apart from "the store
rejected the write" without inspecting SQLAlchemy internals.
"""

from __future__ import annotations


class ForumError(RuntimeError):
    """Base exception raised by the forum core."""


class NotFoundError(ForumError):
    """Raised when a referenced entity identifier does not resolve."""

    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(f"{entity} {identifier!r} not found")
        self.entity = entity
        self.identifier = identifier


class AlreadyAdmittedError(ForumError):
    """Raised when a comment that already passed moderation is admitted again."""

    def __init__(self, comment_id: int) -> None:
        super().__init__(f"Comment {comment_id} is already admitted")
        self.comment_id = comment_id


class InputValidationError(ForumError):
    """Raised for malformed caller input, e.g. missing privacy fields."""


class StoreError(ForumError):
    """Base class for failures reported by the entity store."""


class ConstraintViolationError(StoreError):
    """Raised when the store rejects a write (uniqueness, foreign keys...)."""


class TransientStoreError(StoreError):
    """Raised on connectivity problems or timeouts; the caller may retry."""
