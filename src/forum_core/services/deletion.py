# src/forum_core/services/deletion.py
"""Cascading deletion of forum content and anonymization of members.

Rows are removed bottom-up (votes, then comments, then topics, then the
section) inside a single unit of work, so referential integrity holds even on
stores without ``ON DELETE CASCADE`` and a failure leaves nothing half-deleted.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Delete, delete, func, select
from sqlalchemy.orm import Session

from forum_core.db.transaction import unit_of_work
from forum_core.errors import NotFoundError
from forum_core.models import Comment, Like, Section, Theme, UserProfile
from forum_core.schemas.common import DeletionResponse
from forum_core.services.roles import RoleDirectory, SqlRoleDirectory

logger = logging.getLogger(__name__)


class DeletionOutcome(enum.Enum):
    """What a successful deletion call actually did."""

    DELETED = "deleted"
    ANONYMIZED = "anonymized"
    NOTHING_TO_DO = "nothing_to_do"


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of a deletion together with the number of rows removed."""

    outcome: DeletionOutcome
    sections: int = 0
    topics: int = 0
    comments: int = 0
    likes: int = 0

    @property
    def changed(self) -> bool:
        """Return True when the call modified the store."""
        return self.outcome is not DeletionOutcome.NOTHING_TO_DO


NOTHING_TO_DO = DeletionResult(DeletionOutcome.NOTHING_TO_DO)


class DeletionService:
    """Removes sections, topics and comments with everything they own."""

    def __init__(self, db: Session, roles: RoleDirectory | None = None) -> None:
        self.db = db
        self.roles = roles if roles is not None else SqlRoleDirectory(db)

    def _delete_where(self, stmt: Delete) -> None:
        self.db.execute(stmt.execution_options(synchronize_session="fetch"))

    def _ids(self, column: Any, *criteria: Any) -> list[int]:
        return list(self.db.scalars(select(column).where(*criteria)))

    def _purge_comments(self, comment_ids: Sequence[int]) -> tuple[int, int]:
        if not comment_ids:
            return 0, 0
        likes = self.db.scalar(
            select(func.count(Like.id)).where(Like.comment_id.in_(comment_ids))
        )
        self._delete_where(delete(Like).where(Like.comment_id.in_(comment_ids)))
        self._delete_where(delete(Comment).where(Comment.id.in_(comment_ids)))
        return int(likes or 0), len(comment_ids)

    def _purge_topics(self, topic_ids: Sequence[int]) -> tuple[int, int, int]:
        if not topic_ids:
            return 0, 0, 0
        comment_ids = self._ids(Comment.id, Comment.theme_id.in_(topic_ids))
        likes, comments = self._purge_comments(comment_ids)
        self._delete_where(delete(Theme).where(Theme.id.in_(topic_ids)))
        return likes, comments, len(topic_ids)

    def delete_comment(self, comment_id: int) -> DeletionResult:
        """Delete a comment and its votes; a missing comment is a no-op."""
        with unit_of_work(self.db):
            likes, comments = self._purge_comments(
                self._ids(Comment.id, Comment.id == comment_id)
            )
        if not comments:
            logger.debug("Comment %d already gone", comment_id)
            return NOTHING_TO_DO
        logger.info("Deleted comment %d with %d votes", comment_id, likes)
        return DeletionResult(DeletionOutcome.DELETED, comments=comments, likes=likes)

    def delete_topic(self, topic_id: int) -> DeletionResult:
        """Delete a topic, its comments and their votes; a missing topic is a no-op."""
        with unit_of_work(self.db):
            likes, comments, topics = self._purge_topics(
                self._ids(Theme.id, Theme.id == topic_id)
            )
        if not topics:
            logger.debug("Topic %d already gone", topic_id)
            return NOTHING_TO_DO
        logger.info(
            "Deleted topic %d with %d comments and %d votes", topic_id, comments, likes
        )
        return DeletionResult(
            DeletionOutcome.DELETED, topics=topics, comments=comments, likes=likes
        )

    def delete_section(self, section_id: int) -> DeletionResult:
        """Delete a section and every topic in it; a missing section is a no-op."""
        with unit_of_work(self.db):
            sections = len(self._ids(Section.id, Section.id == section_id))
            likes, comments, topics = self._purge_topics(
                self._ids(Theme.id, Theme.section_id == section_id)
            )
            self._delete_where(delete(Section).where(Section.id == section_id))
        if not sections:
            logger.debug("Section %d already gone", section_id)
            return NOTHING_TO_DO
        logger.info(
            "Deleted section %d with %d topics, %d comments and %d votes",
            section_id,
            topics,
            comments,
            likes,
        )
        return DeletionResult(
            DeletionOutcome.DELETED,
            sections=sections,
            topics=topics,
            comments=comments,
            likes=likes,
        )

    def anonymize_user(self, user_id: int) -> DeletionResult:
        """Irreversibly erase a member's personal data and role memberships.

        The profile row and everything the member authored stay in place;
        listings then show the configured deleted-user name for that author.

        Raises:
            NotFoundError: If the profile does not exist.
        """
        with unit_of_work(self.db):
            profile = self.db.get(UserProfile, user_id)
            if profile is None:
                raise NotFoundError("UserProfile", user_id)

            pii = (
                profile.user_name,
                profile.email,
                profile.image_data,
                profile.image_mime_type,
                profile.mobile,
            )
            if all(value is None for value in pii):
                return NOTHING_TO_DO

            if profile.user_name is not None:
                roles = self.roles.roles_of(profile.user_name)
                if roles:
                    self.roles.remove_from_roles(profile.user_name, roles)

            profile.user_name = None
            profile.email = None
            profile.image_data = None
            profile.image_mime_type = None
            profile.mobile = None

        logger.info("Anonymized user %d", user_id)
        return DeletionResult(DeletionOutcome.ANONYMIZED)


def to_deletion_response(result: DeletionResult) -> DeletionResponse:
    """Convert a DeletionResult to an API schema."""
    return DeletionResponse(
        outcome=result.outcome.value,
        sections=result.sections,
        topics=result.topics,
        comments=result.comments,
        likes=result.likes,
    )
