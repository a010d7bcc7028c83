# mypy: ignore-errors
"""Tests for comment vote and deletion endpoints."""

from fastapi import status

from forum_core.models import Comment, Like
from tests.factories import make_comment, make_like


def test_cast_vote(client, other_member_headers, db_session, theme, member) -> None:
    """Votes are recorded and show up in the comment's total."""
    comment = make_comment(db_session, theme, member, admitted=True)

    response = client.post(
        f"/api/v1/comments/{comment.id}/votes", json={"vote": -1}, headers=other_member_headers
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["vote"] == -1

    listing = client.get(f"/api/v1/topics/{theme.id}/comments")
    assert listing.json()[0]["vote_total"] == -1


def test_cast_vote_requires_identity(client, db_session, theme, member) -> None:
    """Anonymous visitors cannot vote."""
    comment = make_comment(db_session, theme, member, admitted=True)
    response = client.post(f"/api/v1/comments/{comment.id}/votes", json={"vote": 1})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_cast_vote_on_unknown_comment(client, member_headers) -> None:
    """Voting on a missing comment is a 404."""
    response = client.post("/api/v1/comments/99999/votes", json={"vote": 1}, headers=member_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_comment(client, moderator_headers, db_session, theme, member, other_member) -> None:
    """Deleting a comment removes its votes as well."""
    comment = make_comment(db_session, theme, member)
    make_like(db_session, comment, other_member, 1)
    comment_id = comment.id

    response = client.delete(f"/api/v1/comments/{comment_id}", headers=moderator_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "outcome": "deleted",
        "sections": 0,
        "topics": 0,
        "comments": 1,
        "likes": 1,
    }
    assert db_session.get(Comment, comment_id) is None


def test_delete_missing_comment(client, moderator_headers) -> None:
    """Deleting a missing comment succeeds with nothing to do."""
    response = client.delete("/api/v1/comments/99999", headers=moderator_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["outcome"] == "nothing_to_do"


def test_delete_comment_requires_moderator(client, member_headers, db_session, theme, member) -> None:
    """Authors cannot delete their comments through this endpoint."""
    comment = make_comment(db_session, theme, member)
    response = client.delete(f"/api/v1/comments/{comment.id}", headers=member_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_cast_vote_out_of_range(client, other_member_headers, db_session, theme, member) -> None:
    """A vote beyond the INTEGER range is rejected before reaching the store."""
    comment = make_comment(db_session, theme, member, admitted=True)

    response = client.post(
        f"/api/v1/comments/{comment.id}/votes",
        json={"vote": 10**20},
        headers=other_member_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert db_session.query(Like).count() == 0
