"""SQLAlchemy models for role membership."""
from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from forum_core.db.session import Base


class Role(Base):
    """Named role such as ``admin`` or ``moderator``."""

    __tablename__ = "role"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role_name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)


class UserInRole(Base):
    """Join table mapping members into roles."""

    __tablename__ = "user_in_role"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_profile.id"),
        primary_key=True,
    )
    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("role.id"),
        primary_key=True,
    )
    # Presence implies membership.
