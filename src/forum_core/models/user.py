# src/forum_core/models/user.py
"""SQLAlchemy models for forum members and their privacy preferences."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, LargeBinary, Text
from sqlalchemy.orm import Mapped, mapped_column

from forum_core.db.session import Base
from forum_core.db.time import utcnow


class UserProfile(Base):
    """Registered forum member.

    Profiles are never physically removed. Anonymization clears the personal
    fields in place so authored content keeps a resolvable ``author_id``.
    """

    __tablename__ = "user_profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Login/display name; NULL once the member has been anonymized.
    user_name: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    mobile: Mapped[str | None] = mapped_column(Text, nullable=True)
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    image_data: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    image_mime_type: Mapped[str | None] = mapped_column(Text, nullable=True)

    @property
    def has_avatar(self) -> bool:
        """Return True when the member uploaded an avatar image."""
        return self.image_data is not None

    @property
    def is_anonymized(self) -> bool:
        """Return True once the personal fields have been erased."""
        return self.user_name is None


class UserProperty(Base):
    """Per-member privacy flags; a missing row means both fields are hidden."""

    __tablename__ = "user_property"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_profile.id"),
        primary_key=True,
    )
    show_email: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    show_mobile: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
