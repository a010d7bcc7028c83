# mypy: ignore-errors
# tests/test_health.py
"""Tests for the service-level endpoints and error mapping."""

from fastapi import status

from forum_core.errors import (
    AlreadyAdmittedError,
    ConstraintViolationError,
    ForumError,
    InputValidationError,
    NotFoundError,
    TransientStoreError,
)
from forum_core.main import status_for
from forum_core.services.moderation import ModerationService


def test_health_check(client) -> None:
    """The health endpoint reports ok."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root_describes_service(client, test_settings) -> None:
    """The root endpoint returns the service name and version."""
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["name"] == test_settings.app_name
    assert data["version"] == test_settings.app_version


def test_status_for_each_forum_error() -> None:
    """Every error of the taxonomy maps onto its HTTP status."""
    assert status_for(NotFoundError("Comment", 1)) == status.HTTP_404_NOT_FOUND
    assert status_for(AlreadyAdmittedError(1)) == status.HTTP_409_CONFLICT
    assert status_for(InputValidationError("bad")) == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert status_for(ConstraintViolationError("dup")) == status.HTTP_409_CONFLICT
    assert status_for(TransientStoreError("timeout")) == status.HTTP_503_SERVICE_UNAVAILABLE
    assert status_for(ForumError("other")) == status.HTTP_500_INTERNAL_SERVER_ERROR


def test_transient_error_response(client, moderator_headers, monkeypatch) -> None:
    """Transient store failures become 503 with a retry hint."""

    def unavailable(self):
        raise TransientStoreError("database is locked")

    monkeypatch.setattr(ModerationService, "list_pending", unavailable)

    response = client.get("/api/v1/moderation/pending", headers=moderator_headers)
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.headers["Retry-After"] == "1"
    assert response.json() == {"detail": "database is locked", "error": "TransientStoreError"}
