# mypy: ignore-errors
"""Tests for cascading deletion and member anonymization."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from forum_core.errors import NotFoundError, TransientStoreError
from forum_core.models import Comment, Like, Section, Theme, UserInRole, UserProfile
from forum_core.services.deletion import (
    DeletionOutcome,
    DeletionResult,
    DeletionService,
    to_deletion_response,
)
from forum_core.services.moderation import ModerationService
from forum_core.services.roles import SqlRoleDirectory
from tests.factories import make_comment, make_like, make_profile, make_section, make_theme


def _count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


@pytest.fixture()
def populated(db_session, section, theme, member, other_member):
    """A section with two topics, comments and votes on them."""
    second = make_theme(db_session, section, other_member, "Second")
    c1 = make_comment(db_session, theme, member, admitted=True)
    c2 = make_comment(db_session, theme, other_member)
    c3 = make_comment(db_session, second, member, admitted=True)
    make_like(db_session, c1, other_member, 1)
    make_like(db_session, c1, member, -1)
    make_like(db_session, c2, member, 2)
    make_like(db_session, c3, other_member, 1)
    return {"section": section, "topics": (theme, second), "comments": (c1, c2, c3)}


def test_delete_comment_removes_votes(db_session, populated) -> None:
    """A comment goes together with its own votes only."""
    c1 = populated["comments"][0]
    comment_id = c1.id

    result = DeletionService(db_session).delete_comment(comment_id)

    assert result == DeletionResult(DeletionOutcome.DELETED, comments=1, likes=2)
    assert db_session.get(Comment, comment_id) is None
    assert db_session.scalar(select(func.count(Like.id)).where(Like.comment_id == comment_id)) == 0
    assert _count(db_session, Like) == 2
    assert _count(db_session, Comment) == 2


def test_delete_topic_cascades(db_session, populated) -> None:
    """Deleting a topic leaves no comment listing and no dangling votes."""
    theme = populated["topics"][0]
    topic_id = theme.id
    comment_ids = [c.id for c in populated["comments"][:2]]

    result = DeletionService(db_session).delete_topic(topic_id)

    assert result.outcome is DeletionOutcome.DELETED
    assert (result.topics, result.comments, result.likes) == (1, 2, 3)
    assert ModerationService(db_session).list_comments(topic_id, True) == []
    assert db_session.scalar(
        select(func.count(Like.id)).where(Like.comment_id.in_(comment_ids))
    ) == 0
    assert db_session.get(Theme, topic_id) is None
    assert db_session.get(Theme, populated["topics"][1].id) is not None


def test_delete_section_cascades(db_session, populated, member) -> None:
    """Deleting a section removes every level beneath it."""
    section_id = populated["section"].id
    unrelated = make_section(db_session, "Unrelated")
    kept_topic = make_theme(db_session, unrelated, member, "Kept")

    result = DeletionService(db_session).delete_section(section_id)

    assert result == DeletionResult(
        DeletionOutcome.DELETED, sections=1, topics=2, comments=3, likes=4
    )
    assert db_session.get(Section, section_id) is None
    assert _count(db_session, Comment) == 0
    assert _count(db_session, Like) == 0
    assert _count(db_session, Theme) == 1
    assert db_session.get(Theme, kept_topic.id) is not None


def test_delete_empty_section(db_session) -> None:
    """A section without topics is deleted on its own."""
    empty = make_section(db_session, "Empty")

    result = DeletionService(db_session).delete_section(empty.id)

    assert result == DeletionResult(DeletionOutcome.DELETED, sections=1)


@pytest.mark.parametrize("method", ["delete_comment", "delete_topic", "delete_section"])
def test_delete_missing_is_nothing_to_do(db_session, method) -> None:
    """Deleting something already gone succeeds without changes."""
    result = getattr(DeletionService(db_session), method)(31337)

    assert result.outcome is DeletionOutcome.NOTHING_TO_DO
    assert result.changed is False


def test_failed_delete_rolls_back(db_session, populated, monkeypatch) -> None:
    """A store failure midway leaves every row in place."""
    service = DeletionService(db_session)
    section_id = populated["section"].id
    calls = []
    real_delete_where = service._delete_where

    def flaky_delete_where(stmt):
        calls.append(stmt)
        if len(calls) == 3:
            raise OperationalError("DELETE", {}, Exception("database is locked"))
        real_delete_where(stmt)

    monkeypatch.setattr(service, "_delete_where", flaky_delete_where)

    with pytest.raises(TransientStoreError):
        service.delete_section(section_id)

    assert len(calls) == 3
    assert _count(db_session, Like) == 4
    assert _count(db_session, Comment) == 3
    assert _count(db_session, Theme) == 2
    assert db_session.get(Section, section_id) is not None


def test_deletion_response_shape() -> None:
    """Results convert to the API schema with the outcome as a string."""
    response = to_deletion_response(DeletionResult(DeletionOutcome.DELETED, topics=1))

    assert response.outcome == "deleted"
    assert response.topics == 1
    assert response.sections == 0


def test_anonymize_user(db_session, theme, member) -> None:
    """Personal data and roles are erased; authored content stays."""
    SqlRoleDirectory(db_session).add_to_role("alice", "moderator")
    db_session.commit()
    comment = make_comment(db_session, theme, member, admitted=True)
    member_id, comment_id = member.id, comment.id

    result = DeletionService(db_session).anonymize_user(member_id)

    assert result.outcome is DeletionOutcome.ANONYMIZED
    profile = db_session.get(UserProfile, member_id)
    assert profile.user_name is None
    assert profile.email is None
    assert profile.mobile is None
    assert profile.image_data is None
    assert profile.image_mime_type is None
    assert _count(db_session, UserInRole) == 0
    assert db_session.get(Comment, comment_id).author_id == member_id


def test_anonymize_twice_is_nothing_to_do(db_session, member) -> None:
    """A second anonymization has nothing left to erase."""
    service = DeletionService(db_session)

    assert service.anonymize_user(member.id).outcome is DeletionOutcome.ANONYMIZED
    assert service.anonymize_user(member.id).outcome is DeletionOutcome.NOTHING_TO_DO


def test_anonymize_unknown_user(db_session) -> None:
    """Anonymizing a missing member raises NotFoundError."""
    with pytest.raises(NotFoundError):
        DeletionService(db_session).anonymize_user(999)


class RecordingRoles:
    """In-memory role directory used to observe the calls made."""

    def __init__(self, roles):
        self.roles = {name: set(r) for name, r in roles.items()}
        self.removed = []

    def roles_of(self, user_name):
        return set(self.roles.get(user_name, ()))

    def remove_from_roles(self, user_name, roles):
        roles = set(roles)
        self.removed.append((user_name, roles))
        self.roles[user_name] -= roles


def test_anonymize_uses_injected_role_directory(db_session) -> None:
    """Roles are removed through whichever directory the service was given."""
    profile = make_profile(db_session, "erin", email="erin@example.org")
    roles = RecordingRoles({"erin": {"moderator", "editor"}})

    DeletionService(db_session, roles=roles).anonymize_user(profile.id)

    assert roles.removed == [("erin", {"moderator", "editor"})]
    assert roles.roles["erin"] == set()
