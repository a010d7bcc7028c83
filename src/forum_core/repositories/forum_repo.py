"""Data access helpers for forum entities."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from forum_core.models import Comment, Like, Section, Theme, UserProfile, UserProperty

__all__ = ["ForumRepository"]


class ForumRepository:
    """Thin wrapper around database access for sections, topics and comments.

    The repository only flushes; committing is left to the caller's unit of
    work so several writes can share one transaction.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_section(self, section_id: int) -> Section | None:
        """Return a section by identifier."""
        return self.session.get(Section, section_id)

    def get_theme(self, theme_id: int) -> Theme | None:
        """Return a topic by identifier."""
        return self.session.get(Theme, theme_id)

    def get_comment(self, comment_id: int) -> Comment | None:
        """Return a comment by identifier."""
        return self.session.get(Comment, comment_id)

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return a member profile by identifier."""
        return self.session.get(UserProfile, user_id)

    def get_property(self, user_id: int) -> UserProperty | None:
        """Return the privacy row of a member, if one was ever created."""
        result = self.session.execute(
            select(UserProperty).where(UserProperty.user_id == user_id)
        )
        return result.scalars().first()

    def add_section(self, *, title: str) -> Section:
        """Insert a new section."""
        section = Section(title=title)
        self.session.add(section)
        self.session.flush()
        return section

    def add_theme(
        self,
        *,
        section_id: int,
        author_id: int,
        title: str,
        created_at: datetime | None = None,
    ) -> Theme:
        """Insert a new topic under an existing section."""
        theme = Theme(section_id=section_id, author_id=author_id, title=title)
        if created_at is not None:
            theme.created_at = created_at
        self.session.add(theme)
        self.session.flush()
        return theme

    def add_comment(
        self,
        *,
        theme_id: int,
        author_id: int,
        text: str,
        created_at: datetime | None = None,
    ) -> Comment:
        """Insert a new, not yet admitted comment."""
        comment = Comment(theme_id=theme_id, author_id=author_id, text=text, is_admitted=False)
        if created_at is not None:
            comment.created_at = created_at
        self.session.add(comment)
        self.session.flush()
        return comment

    def add_like(self, *, comment_id: int, voter_id: int, vote: int) -> Like:
        """Insert a vote on a comment."""
        like = Like(comment_id=comment_id, voter_id=voter_id, vote=vote)
        self.session.add(like)
        self.session.flush()
        return like

    def add_property(self, *, user_id: int, show_email: bool, show_mobile: bool) -> UserProperty:
        """Insert the privacy row of a member."""
        prop = UserProperty(user_id=user_id, show_email=show_email, show_mobile=show_mobile)
        self.session.add(prop)
        self.session.flush()
        return prop
