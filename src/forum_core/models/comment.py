# src/forum_core/models/comment.py
"""Models capturing comments and the votes cast on them."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from forum_core.db.session import Base
from forum_core.db.time import utcnow


class Comment(Base):
    """Post inside a topic, hidden from the public until admitted."""

    __tablename__ = "comment"
    __table_args__ = (
        Index("ix_comment_theme_id", "theme_id"),
        Index("ix_comment_author_id", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_profile.id"),
        nullable=False,
    )
    theme_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("theme.id"),
        nullable=False,
    )
    # Flips to True exactly once, through moderation.
    is_admitted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class Like(Base):
    """Signed vote cast by a member on a comment.

    Several votes from the same member on one comment are allowed; the sign
    and magnitude of ``vote`` carry the up/down semantics.
    """

    __tablename__ = "comment_like"
    __table_args__ = (Index("ix_comment_like_comment_id", "comment_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comment.id"),
        nullable=False,
    )
    voter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_profile.id"),
        nullable=False,
    )
    vote: Mapped[int] = mapped_column(Integer, nullable=False)
