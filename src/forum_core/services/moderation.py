# src/forum_core/services/moderation.py
"""Moderation services: comment visibility and admission."""

from __future__ import annotations

import logging

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session

from forum_core.core.settings import settings
from forum_core.db.transaction import unit_of_work
from forum_core.errors import AlreadyAdmittedError, NotFoundError
from forum_core.models import Comment, Like, Theme, UserProfile
from forum_core.schemas.comment import CommentView, PendingCommentView

logger = logging.getLogger(__name__)


class ModerationService:
    """Service deciding which comments a viewer sees and admitting comments."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_comments(
        self,
        topic_id: int,
        viewer_has_full_access: bool,
        viewer_id: int | None = None,
    ) -> list[CommentView]:
        """Return the comments of a topic visible to the viewer, oldest first.

        Args:
            topic_id: Topic whose comments are listed.
            viewer_has_full_access: True for moderators, who see every comment.
            viewer_id: Member looking at the topic, or None for anonymous visitors.

        Returns:
            Moderators get every comment. Anonymous visitors get admitted
            comments only. Other members get admitted comments plus their own
            pending ones.
        """
        vote_totals = (
            select(Like.comment_id, func.sum(Like.vote).label("total"))
            .group_by(Like.comment_id)
            .subquery()
        )
        stmt = (
            select(
                Comment.id,
                Comment.text,
                Comment.created_at,
                Comment.author_id,
                Comment.is_admitted,
                UserProfile.user_name,
                UserProfile.image_data.is_not(None).label("has_avatar"),
                func.coalesce(vote_totals.c.total, 0).label("vote_total"),
            )
            .select_from(Comment)
            .outerjoin(UserProfile, UserProfile.id == Comment.author_id)
            .outerjoin(vote_totals, vote_totals.c.comment_id == Comment.id)
            .where(Comment.theme_id == topic_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )

        if not viewer_has_full_access:
            if viewer_id is None:
                stmt = stmt.where(Comment.is_admitted.is_(True))
            else:
                stmt = stmt.where(
                    or_(Comment.is_admitted.is_(True), Comment.author_id == viewer_id)
                )

        return [
            CommentView(
                id=row.id,
                text=row.text,
                created_at=row.created_at,
                author_name=row.user_name or settings.deleted_user_name,
                author_id=row.author_id,
                vote_total=int(row.vote_total),
                has_avatar=bool(row.has_avatar),
                is_admitted=bool(row.is_admitted),
            )
            for row in self.db.execute(stmt)
        ]

    def list_pending(self) -> list[PendingCommentView]:
        """Return every comment awaiting admission, newest first."""
        stmt = (
            select(
                Comment.id,
                Comment.text,
                Comment.created_at,
                Comment.theme_id,
                Theme.title.label("theme_title"),
                Comment.author_id,
                UserProfile.user_name,
            )
            .select_from(Comment)
            .join(Theme, Theme.id == Comment.theme_id)
            .outerjoin(UserProfile, UserProfile.id == Comment.author_id)
            .where(Comment.is_admitted.is_(False))
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return [
            PendingCommentView(
                comment_id=row.id,
                text=row.text,
                created_at=row.created_at,
                topic_id=row.theme_id,
                topic_title=row.theme_title,
                author_id=row.author_id,
                author_name=row.user_name or settings.deleted_user_name,
            )
            for row in self.db.execute(stmt)
        ]

    def admit(self, comment_id: int) -> None:
        """Admit a pending comment, making it publicly visible.

        The flag is flipped with a conditional UPDATE so that of two
        concurrent admissions exactly one succeeds.

        Raises:
            NotFoundError: If the comment does not exist.
            AlreadyAdmittedError: If the comment was admitted before.
        """
        with unit_of_work(self.db):
            result = self.db.execute(
                update(Comment)
                .where(Comment.id == comment_id, Comment.is_admitted.is_(False))
                .values(is_admitted=True)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                exists = self.db.scalar(select(Comment.id).where(Comment.id == comment_id))
                if exists is None:
                    raise NotFoundError("Comment", comment_id)
                raise AlreadyAdmittedError(comment_id)

        logger.info("Admitted comment %d", comment_id)
