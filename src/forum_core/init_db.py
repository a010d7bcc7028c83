# src/forum_core/init_db.py
"""Create the forum tables on the configured database."""

from forum_core.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    init_db()
    print("Database initialized.")
