"""Service-level helpers for creating sections, topics, comments and votes."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from forum_core.db.transaction import unit_of_work
from forum_core.errors import InputValidationError, NotFoundError
from forum_core.models import Comment, Like, Section, Theme, UserProfile
from forum_core.repositories.forum_repo import ForumRepository

logger = logging.getLogger(__name__)

__all__ = [
    "add_section",
    "add_topic",
    "add_comment",
    "cast_vote",
    "get_section",
    "get_topic",
    "get_comment",
    "get_profile",
]


def _require_text(value: str, field: str) -> str:
    if not (value or "").strip():
        raise InputValidationError(f"{field} must not be empty")
    return value


def _require_profile(repo: ForumRepository, user_id: int) -> UserProfile:
    profile = repo.get_profile(user_id)
    if profile is None:
        raise NotFoundError("UserProfile", user_id)
    return profile


def get_section(db: Session, section_id: int) -> Section:
    """Return a section or raise :class:`NotFoundError`."""
    section = ForumRepository(db).get_section(section_id)
    if section is None:
        raise NotFoundError("Section", section_id)
    return section


def get_topic(db: Session, topic_id: int) -> Theme:
    """Return a topic or raise :class:`NotFoundError`."""
    theme = ForumRepository(db).get_theme(topic_id)
    if theme is None:
        raise NotFoundError("Theme", topic_id)
    return theme


def get_comment(db: Session, comment_id: int) -> Comment:
    """Return a comment or raise :class:`NotFoundError`."""
    comment = ForumRepository(db).get_comment(comment_id)
    if comment is None:
        raise NotFoundError("Comment", comment_id)
    return comment


def get_profile(db: Session, user_id: int) -> UserProfile:
    """Return a member profile or raise :class:`NotFoundError`."""
    return _require_profile(ForumRepository(db), user_id)


def add_section(db: Session, title: str) -> Section:
    """Create a new section."""
    title = _require_text(title, "title")
    with unit_of_work(db):
        section = ForumRepository(db).add_section(title=title)
    logger.info("Created section %d", section.id)
    return section


def add_topic(db: Session, *, section_id: int, author_id: int, title: str) -> Theme:
    """Open a topic in an existing section.

    Raises:
        NotFoundError: If the section or the author does not exist.
        InputValidationError: If the title is blank.
    """
    title = _require_text(title, "title")
    repo = ForumRepository(db)
    with unit_of_work(db):
        if repo.get_section(section_id) is None:
            raise NotFoundError("Section", section_id)
        _require_profile(repo, author_id)
        theme = repo.add_theme(section_id=section_id, author_id=author_id, title=title)
    logger.info("Created topic %d in section %d", theme.id, section_id)
    return theme


def add_comment(db: Session, *, topic_id: int, author_id: int, text: str) -> Comment:
    """Post a comment to a topic; it stays pending until admitted.

    Raises:
        NotFoundError: If the topic or the author does not exist.
        InputValidationError: If the text is blank.
    """
    text = _require_text(text, "text")
    repo = ForumRepository(db)
    with unit_of_work(db):
        if repo.get_theme(topic_id) is None:
            raise NotFoundError("Theme", topic_id)
        _require_profile(repo, author_id)
        comment = repo.add_comment(theme_id=topic_id, author_id=author_id, text=text)
    logger.info("Created pending comment %d in topic %d", comment.id, topic_id)
    return comment


def cast_vote(db: Session, *, comment_id: int, voter_id: int, vote: int) -> Like:
    """Record a signed vote on a comment.

    Raises:
        NotFoundError: If the comment or the voter does not exist.
    """
    repo = ForumRepository(db)
    with unit_of_work(db):
        if repo.get_comment(comment_id) is None:
            raise NotFoundError("Comment", comment_id)
        _require_profile(repo, voter_id)
        like = repo.add_like(comment_id=comment_id, voter_id=voter_id, vote=vote)
    logger.debug("Recorded vote %+d on comment %d", vote, comment_id)
    return like
