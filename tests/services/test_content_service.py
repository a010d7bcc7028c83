# mypy: ignore-errors
"""Tests for creating sections, topics, comments and votes."""

import pytest

from forum_core.errors import InputValidationError, NotFoundError
from forum_core.models import Like
from forum_core.services import content


def test_add_section_keeps_title(db_session) -> None:
    """Titles are stored exactly as given."""
    section = content.add_section(db_session, "  News  ")

    assert section.id is not None
    assert content.get_section(db_session, section.id).title == "  News  "


def test_add_section_rejects_blank_title(db_session) -> None:
    """A blank title is invalid input."""
    with pytest.raises(InputValidationError):
        content.add_section(db_session, "   ")


def test_add_topic(db_session, section, member) -> None:
    """A topic is created in the section with the given author."""
    theme = content.add_topic(db_session, section_id=section.id, author_id=member.id, title="Hi")

    assert theme.section_id == section.id
    assert theme.author_id == member.id
    assert theme.created_at is not None


def test_add_topic_to_unknown_section(db_session, member) -> None:
    """Topics need an existing section."""
    with pytest.raises(NotFoundError):
        content.add_topic(db_session, section_id=999, author_id=member.id, title="Hi")


def test_add_topic_by_unknown_author(db_session, section) -> None:
    """Topics need an existing author."""
    with pytest.raises(NotFoundError):
        content.add_topic(db_session, section_id=section.id, author_id=999, title="Hi")


def test_add_comment_is_pending(db_session, theme, other_member) -> None:
    """New comments wait for admission."""
    comment = content.add_comment(
        db_session, topic_id=theme.id, author_id=other_member.id, text="First!"
    )

    assert comment.is_admitted is False
    assert comment.theme_id == theme.id


def test_add_comment_keeps_surrounding_whitespace(db_session, theme, member) -> None:
    """Comment text is stored verbatim, indentation and trailing newline included."""
    text = "  quoted\n    code\n"
    comment = content.add_comment(db_session, topic_id=theme.id, author_id=member.id, text=text)

    db_session.expire_all()
    assert content.get_comment(db_session, comment.id).text == text


def test_add_comment_validation(db_session, theme, member) -> None:
    """Blank text and unknown topics are rejected."""
    with pytest.raises(InputValidationError):
        content.add_comment(db_session, topic_id=theme.id, author_id=member.id, text="")
    with pytest.raises(NotFoundError):
        content.add_comment(db_session, topic_id=999, author_id=member.id, text="hello")


def test_cast_vote(db_session, theme, member, other_member) -> None:
    """Votes keep their sign."""
    comment = content.add_comment(db_session, topic_id=theme.id, author_id=member.id, text="x")

    like = content.cast_vote(db_session, comment_id=comment.id, voter_id=other_member.id, vote=-1)

    assert like.vote == -1
    assert like.voter_id == other_member.id


def test_cast_vote_on_unknown_comment(db_session, member) -> None:
    """Votes need an existing comment."""
    with pytest.raises(NotFoundError):
        content.cast_vote(db_session, comment_id=999, voter_id=member.id, vote=1)


@pytest.mark.parametrize(
    "getter",
    [content.get_section, content.get_topic, content.get_comment, content.get_profile],
)
def test_lookups_raise_not_found(db_session, getter) -> None:
    """Every lookup helper reports a missing row as NotFoundError."""
    with pytest.raises(NotFoundError):
        getter(db_session, 999)


def test_cast_vote_out_of_range(db_session, theme, member, other_member) -> None:
    """A vote the store cannot hold is invalid input and nothing is written."""
    comment = content.add_comment(db_session, topic_id=theme.id, author_id=member.id, text="x")

    with pytest.raises(InputValidationError):
        content.cast_vote(db_session, comment_id=comment.id, voter_id=other_member.id, vote=10**20)

    assert db_session.query(Like).count() == 0


def test_cast_vote_on_out_of_range_comment(db_session, member) -> None:
    """An identifier the store cannot hold is invalid input."""
    with pytest.raises(InputValidationError):
        content.cast_vote(db_session, comment_id=10**20, voter_id=member.id, vote=1)
