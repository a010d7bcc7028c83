"""Shared API dependencies for viewer resolution and common functionality."""

from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Path, status
from sqlalchemy.orm import Session

from forum_core.core.settings import settings
from forum_core.db.session import get_db
from forum_core.models import UserProfile
from forum_core.schemas.common import STORE_INT_MAX
from forum_core.services.roles import SqlRoleDirectory

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

# Positive identifier that fits the INTEGER primary key columns
IdPath = Annotated[int, Path(ge=1, le=STORE_INT_MAX)]


@dataclass(frozen=True)
class Viewer:
    """Member on whose behalf a request runs; ``user_id`` is None for visitors."""

    user_id: int | None = None
    roles: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_full_access(self) -> bool:
        """Return True if one of the viewer's roles grants moderator rights."""
        return bool(self.roles & set(settings.full_access_roles))


def get_viewer(
    db: SessionDep,
    x_user_id: Annotated[
        int | None, Header(alias="X-User-Id", ge=1, le=STORE_INT_MAX)
    ] = None,
) -> Viewer:
    """Resolve the viewer from the identity header set by the auth gateway.

    Args:
        db: Database session
        x_user_id: Authenticated member id, absent for anonymous visitors

    Returns:
        The resolved viewer with its role names

    Raises:
        HTTPException: If the header names an unknown or anonymized member
    """
    if x_user_id is None:
        return Viewer()

    profile = db.get(UserProfile, x_user_id)
    if profile is None or profile.is_anonymized:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate viewer",
        )
    roles = SqlRoleDirectory(db).roles_of(profile.user_name)
    return Viewer(user_id=profile.id, roles=frozenset(roles))


ViewerDep = Annotated[Viewer, Depends(get_viewer)]


def get_current_viewer(viewer: ViewerDep) -> Viewer:
    """Require an identified member."""
    if viewer.user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return viewer


CurrentViewerDep = Annotated[Viewer, Depends(get_current_viewer)]


def get_moderator(viewer: CurrentViewerDep) -> Viewer:
    """Require a member holding one of the full-access roles."""
    if not viewer.has_full_access:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Moderator role required",
        )
    return viewer


ModeratorDep = Annotated[Viewer, Depends(get_moderator)]
