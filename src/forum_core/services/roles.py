"""Role membership lookups used for access checks and anonymization."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from forum_core.errors import NotFoundError
from forum_core.models import Role, UserInRole, UserProfile

__all__ = ["RoleDirectory", "SqlRoleDirectory"]


class RoleDirectory(Protocol):
    """Membership provider keyed by login name."""

    def roles_of(self, user_name: str) -> set[str]:
        """Return the names of the roles the member belongs to."""
        ...

    def remove_from_roles(self, user_name: str, roles: Iterable[str]) -> None:
        """Drop the member from the given roles."""
        ...


class SqlRoleDirectory:
    """Role directory backed by the ``role`` and ``user_in_role`` tables.

    It shares the caller's session, so membership changes commit or roll back
    together with the surrounding unit of work.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _user_id(self, user_name: str) -> int | None:
        return self.session.scalar(select(UserProfile.id).where(UserProfile.user_name == user_name))

    def roles_of(self, user_name: str) -> set[str]:
        rows = self.session.scalars(
            select(Role.role_name)
            .join(UserInRole, UserInRole.role_id == Role.id)
            .join(UserProfile, UserProfile.id == UserInRole.user_id)
            .where(UserProfile.user_name == user_name)
        )
        return set(rows)

    def remove_from_roles(self, user_name: str, roles: Iterable[str]) -> None:
        user_id = self._user_id(user_name)
        names = list(roles)
        if user_id is None or not names:
            return
        self.session.execute(
            delete(UserInRole)
            .where(
                UserInRole.user_id == user_id,
                UserInRole.role_id.in_(select(Role.id).where(Role.role_name.in_(names))),
            )
            .execution_options(synchronize_session="fetch")
        )

    def add_to_role(self, user_name: str, role_name: str) -> None:
        """Grant a role, creating it when unknown."""
        user_id = self._user_id(user_name)
        if user_id is None:
            raise NotFoundError("UserProfile", user_name)
        role = self.session.scalars(select(Role).where(Role.role_name == role_name)).first()
        if role is None:
            role = Role(role_name=role_name)
            self.session.add(role)
            self.session.flush()
        if self.session.get(UserInRole, (user_id, role.id)) is None:
            self.session.add(UserInRole(user_id=user_id, role_id=role.id))
            self.session.flush()
