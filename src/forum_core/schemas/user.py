# src/forum_core/schemas/user.py
"""Profile and privacy Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, StrictBool


class PrivacySettings(BaseModel):
    """Current privacy flags of a member plus the stored mobile number."""

    show_email: bool
    show_mobile: bool
    mobile: str


class PrivacySettingsUpdate(BaseModel):
    """Schema for replacing a member's privacy flags and mobile number."""

    show_email: StrictBool
    show_mobile: StrictBool
    mobile: str | None = None


class ProfileSummary(BaseModel):
    """Public profile projection with masked contact details."""

    user_id: int
    display_name: str
    rating: int
    masked_email: str
    masked_mobile: str
    has_avatar: bool
    registered_at: datetime
