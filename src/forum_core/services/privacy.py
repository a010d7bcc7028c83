# src/forum_core/services/privacy.py
"""Privacy settings and the public profile projection of members."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from forum_core.core.settings import settings
from forum_core.db.transaction import unit_of_work
from forum_core.errors import InputValidationError, NotFoundError
from forum_core.models import Comment, Like, UserProfile, UserProperty
from forum_core.repositories.forum_repo import ForumRepository
from forum_core.schemas.user import PrivacySettings, PrivacySettingsUpdate, ProfileSummary

logger = logging.getLogger(__name__)

EMAIL_HIDDEN: Final = "email hidden by user"
EMAIL_NOT_PROVIDED: Final = "email not provided"
MOBILE_HIDDEN: Final = "mobile hidden by user"
MOBILE_NOT_PROVIDED: Final = "mobile not provided"


def mask_contact(value: str | None, shown: bool, *, hidden: str, not_provided: str) -> str:
    """Return what other members may see of a contact field."""
    if not shown:
        return hidden
    if not value:
        return not_provided
    return value


class PrivacyService:
    """Service reading and writing privacy flags and computing member rating."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.repo = ForumRepository(db)

    def _require_profile(self, user_id: int) -> UserProfile:
        profile = self.repo.get_profile(user_id)
        if profile is None:
            raise NotFoundError("UserProfile", user_id)
        return profile

    def get_privacy_settings(self, user_id: int) -> PrivacySettings:
        """Return the member's flags; both are False when no row exists yet.

        Raises:
            NotFoundError: If the profile does not exist.
        """
        profile = self._require_profile(user_id)
        prop = self.repo.get_property(user_id)
        return PrivacySettings(
            show_email=prop.show_email if prop else False,
            show_mobile=prop.show_mobile if prop else False,
            mobile=profile.mobile or "",
        )

    def set_privacy_settings(
        self,
        user_id: int,
        update: PrivacySettingsUpdate | Mapping[str, Any],
    ) -> PrivacySettings:
        """Create or update the member's flags and store the mobile number.

        Raises:
            InputValidationError: If a required flag is missing or malformed.
            NotFoundError: If the profile does not exist.
        """
        if not isinstance(update, PrivacySettingsUpdate):
            try:
                update = PrivacySettingsUpdate.model_validate(update)
            except ValidationError as exc:
                raise InputValidationError(str(exc)) from exc

        with unit_of_work(self.db):
            profile = self._require_profile(user_id)
            prop = self.repo.get_property(user_id)
            if prop is None:
                self.repo.add_property(
                    user_id=user_id,
                    show_email=update.show_email,
                    show_mobile=update.show_mobile,
                )
            else:
                prop.show_email = update.show_email
                prop.show_mobile = update.show_mobile
            profile.mobile = update.mobile

        logger.info("Updated privacy settings of user %d", user_id)
        return self.get_privacy_settings(user_id)

    def _ensure_default_property(self, user_id: int) -> bool:
        if self.repo.get_profile(user_id) is None:
            return False
        if self.repo.get_property(user_id) is not None:
            return False
        self.repo.add_property(user_id=user_id, show_email=False, show_mobile=False)
        return True

    def ensure_default_privacy(self, user_id: int) -> bool:
        """Create a hidden-by-default privacy row if the member has none.

        Returns:
            True if a row was created; False if one existed or the profile is missing.
        """
        with unit_of_work(self.db):
            created = self._ensure_default_property(user_id)
        if created:
            logger.debug("Created default privacy settings for user %d", user_id)
        return created

    def get_rating(self, user_id: int) -> int:
        """Return the sum of every vote cast on comments written by the member."""
        total = self.db.scalar(
            select(func.coalesce(func.sum(Like.vote), 0))
            .select_from(Like)
            .join(Comment, Comment.id == Like.comment_id)
            .where(Comment.author_id == user_id)
        )
        return int(total or 0)

    def get_profile_summary(self, user_id: int) -> ProfileSummary:
        """Return the public profile with contact details masked.

        The default privacy row is created on first access.

        Raises:
            NotFoundError: If the profile does not exist.
        """
        with unit_of_work(self.db):
            profile = self._require_profile(user_id)
            self._ensure_default_property(user_id)

        prop: UserProperty | None = self.repo.get_property(user_id)
        show_email = bool(prop and prop.show_email)
        show_mobile = bool(prop and prop.show_mobile)
        return ProfileSummary(
            user_id=profile.id,
            display_name=profile.user_name or settings.deleted_user_name,
            rating=self.get_rating(user_id),
            masked_email=mask_contact(
                profile.email,
                show_email,
                hidden=EMAIL_HIDDEN,
                not_provided=EMAIL_NOT_PROVIDED,
            ),
            masked_mobile=mask_contact(
                profile.mobile,
                show_mobile,
                hidden=MOBILE_HIDDEN,
                not_provided=MOBILE_NOT_PROVIDED,
            ),
            has_avatar=profile.has_avatar,
            registered_at=profile.registration_date,
        )
