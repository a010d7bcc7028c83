# src/forum_core/scripts/roles.py
"""Grant, revoke and list role memberships from the command line.

Usage:
    python -m forum_core.scripts.roles grant alice moderator
    python -m forum_core.scripts.roles revoke alice moderator
    python -m forum_core.scripts.roles list alice
"""

from __future__ import annotations

import argparse
import sys

from sqlalchemy.orm import Session

from forum_core.db.session import SessionLocal
from forum_core.db.transaction import unit_of_work
from forum_core.errors import ForumError
from forum_core.services.roles import SqlRoleDirectory


def grant(db: Session, user_name: str, role_name: str) -> None:
    """Add ``user_name`` to ``role_name``."""
    with unit_of_work(db):
        SqlRoleDirectory(db).add_to_role(user_name, role_name)
    print(f"Granted {role_name} to {user_name}")


def revoke(db: Session, user_name: str, role_name: str) -> None:
    """Remove ``user_name`` from ``role_name``."""
    with unit_of_work(db):
        SqlRoleDirectory(db).remove_from_roles(user_name, [role_name])
    print(f"Revoked {role_name} from {user_name}")


def show(db: Session, user_name: str) -> None:
    """Print the roles of ``user_name``."""
    roles = sorted(SqlRoleDirectory(db).roles_of(user_name))
    print(f"{user_name}: {', '.join(roles) if roles else '(no roles)'}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage forum role memberships")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("grant", "revoke"):
        cmd = sub.add_parser(name)
        cmd.add_argument("user_name")
        cmd.add_argument("role_name")
    list_cmd = sub.add_parser("list")
    list_cmd.add_argument("user_name")

    args = parser.parse_args(argv)
    db = SessionLocal()
    try:
        if args.command == "grant":
            grant(db, args.user_name, args.role_name)
        elif args.command == "revoke":
            revoke(db, args.user_name, args.role_name)
        else:
            show(db, args.user_name)
    except ForumError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
