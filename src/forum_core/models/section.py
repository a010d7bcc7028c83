"""SQLAlchemy models for forum sections and their topics."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from forum_core.db.session import Base
from forum_core.db.time import utcnow


class Section(Base):
    """Top-level category grouping topics."""

    __tablename__ = "section"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)


class Theme(Base):
    """Discussion topic belonging to exactly one section."""

    __tablename__ = "theme"
    __table_args__ = (
        Index("ix_theme_section_id", "section_id"),
        Index("ix_theme_author_id", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
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
    section_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("section.id"),
        nullable=False,
    )
