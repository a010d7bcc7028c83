"""Member profile, privacy and anonymization endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from forum_core.api.v1.dependencies import CurrentViewerDep, IdPath, ModeratorDep, SessionDep
from forum_core.schemas.common import DeletionResponse
from forum_core.schemas.forum import ShortTopicInfo
from forum_core.schemas.user import PrivacySettings, PrivacySettingsUpdate, ProfileSummary
from forum_core.services import content
from forum_core.services.aggregation import AggregationService
from forum_core.services.deletion import DeletionService, to_deletion_response
from forum_core.services.privacy import PrivacyService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me/privacy", response_model=PrivacySettings)
async def get_my_privacy(viewer: CurrentViewerDep, db: SessionDep) -> PrivacySettings:
    """Return the viewer's privacy flags and stored mobile number."""
    return PrivacyService(db).get_privacy_settings(viewer.user_id)


@router.put("/me/privacy", response_model=PrivacySettings)
async def update_my_privacy(
    update: PrivacySettingsUpdate,
    viewer: CurrentViewerDep,
    db: SessionDep,
) -> PrivacySettings:
    """Replace the viewer's privacy flags and mobile number."""
    return PrivacyService(db).set_privacy_settings(viewer.user_id, update)


@router.get("/{user_id}/summary", response_model=ProfileSummary)
async def get_user_summary(user_id: IdPath, db: SessionDep) -> ProfileSummary:
    """Return a member's public profile with masked contact details."""
    return PrivacyService(db).get_profile_summary(user_id)


@router.get("/{user_id}/topics", response_model=list[ShortTopicInfo])
async def get_user_topics(user_id: IdPath, db: SessionDep) -> list[ShortTopicInfo]:
    """List the topics a member opened, newest first."""
    content.get_profile(db, user_id)
    return AggregationService(db).list_topics_of_user(user_id)


@router.delete("/{user_id}", response_model=DeletionResponse)
async def anonymize_user(
    user_id: IdPath,
    _moderator: ModeratorDep,
    db: SessionDep,
) -> DeletionResponse:
    """Erase a member's personal data; authored content is kept."""
    return to_deletion_response(DeletionService(db).anonymize_user(user_id))
