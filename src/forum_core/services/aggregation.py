# src/forum_core/services/aggregation.py
"""Section and topic listings with comment statistics.

Every listing is an outer join from the parent entity down to its comments,
so a section without topics or a topic without comments still shows up with
zero counts. Comments are partitioned on ``is_admitted`` and counted as
distinct non-null identifiers, which ignores the NULL rows the outer join
produces and the fan-out of several comments per topic.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, case, distinct, func, select
from sqlalchemy.orm import Session

from forum_core.core.settings import settings
from forum_core.errors import InputValidationError
from forum_core.models import Comment, Section, Theme, UserProfile
from forum_core.schemas.forum import SectionSummary, ShortTopicInfo, TopicSummary


def _admitted_count() -> Any:
    return func.count(distinct(case((Comment.is_admitted.is_(True), Comment.id))))


def _pending_count() -> Any:
    return func.count(distinct(case((Comment.is_admitted.is_(False), Comment.id))))


def _display_name(user_name: str | None) -> str:
    """Apply the placeholder used for anonymized authors."""
    return user_name or settings.deleted_user_name


def _topic_summary_query() -> Select[Any]:
    return (
        select(
            Theme.author_id,
            UserProfile.user_name,
            Theme.id.label("topic_id"),
            Theme.title,
            Theme.created_at,
            _admitted_count().label("admitted"),
            _pending_count().label("pending"),
        )
        .select_from(Theme)
        .outerjoin(UserProfile, UserProfile.id == Theme.author_id)
        .outerjoin(Comment, Comment.theme_id == Theme.id)
        .group_by(
            Theme.author_id,
            UserProfile.user_name,
            Theme.id,
            Theme.title,
            Theme.created_at,
        )
        .order_by(Theme.created_at.desc(), Theme.id.desc())
    )


def _to_topic_summary(row: Any) -> TopicSummary:
    return TopicSummary(
        author_id=row.author_id,
        author_name=_display_name(row.user_name),
        topic_id=row.topic_id,
        title=row.title,
        created_at=row.created_at,
        admitted_comment_count=int(row.admitted or 0),
        pending_comment_count=int(row.pending or 0),
    )


class AggregationService:
    """Read-only listings used by the forum index, section and profile pages.

    ``viewer_id`` is accepted by the viewer-facing listings for future
    per-viewer indicators; the counts themselves do not depend on the viewer.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_topics_of_user(self, user_id: int) -> list[ShortTopicInfo]:
        """Return the topics opened by a member, newest first."""
        rows = self.db.execute(
            select(Theme.id, Theme.title, Theme.created_at)
            .where(Theme.author_id == user_id)
            .order_by(Theme.created_at.desc(), Theme.id.desc())
        )
        return [
            ShortTopicInfo(topic_id=row.id, title=row.title, created_at=row.created_at)
            for row in rows
        ]

    def list_recent_topics(
        self,
        limit: int | None = None,
        viewer_id: int | None = None,
    ) -> list[TopicSummary]:
        """Return the most recently opened topics across all sections.

        Args:
            limit: Maximum number of topics; defaults to ``RECENT_TOPICS_LIMIT``.
            viewer_id: Identifier of the member looking at the listing.

        Raises:
            InputValidationError: If ``limit`` is not positive or exceeds
                ``RECENT_TOPICS_MAX_LIMIT``.
        """
        if limit is None:
            limit = settings.recent_topics_limit
        if limit < 1 or limit > settings.recent_topics_max_limit:
            raise InputValidationError(
                f"limit must be between 1 and {settings.recent_topics_max_limit}"
            )
        rows = self.db.execute(_topic_summary_query().limit(limit))
        return [_to_topic_summary(row) for row in rows]

    def list_sections(self, viewer_id: int | None = None) -> list[SectionSummary]:
        """Return every section with topic and comment counts, by title."""
        stmt = (
            select(
                Section.id,
                Section.title,
                func.count(distinct(Theme.id)).label("topics"),
                _admitted_count().label("admitted"),
                _pending_count().label("pending"),
            )
            .select_from(Section)
            .outerjoin(Theme, Theme.section_id == Section.id)
            .outerjoin(Comment, Comment.theme_id == Theme.id)
            .group_by(Section.id, Section.title)
            .order_by(Section.title.asc(), Section.id.asc())
        )
        return [
            SectionSummary(
                section_id=row.id,
                title=row.title,
                topic_count=int(row.topics or 0),
                admitted_comment_count=int(row.admitted or 0),
                pending_comment_count=int(row.pending or 0),
            )
            for row in self.db.execute(stmt)
        ]

    def list_topics_of_section(
        self,
        section_id: int,
        viewer_id: int | None = None,
    ) -> list[TopicSummary]:
        """Return the topics of one section, newest first."""
        rows = self.db.execute(_topic_summary_query().where(Theme.section_id == section_id))
        return [_to_topic_summary(row) for row in rows]
