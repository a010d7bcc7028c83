# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from forum_core.core.settings import Settings
from forum_core.db.session import Base, enable_sqlite_foreign_keys
from forum_core.db.session import get_db as app_get_session
from forum_core.main import app as fastapi_app
from forum_core.models import Section, Theme, UserProfile
from forum_core.services.roles import SqlRoleDirectory
from tests.factories import make_profile, make_section, make_theme

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database since services commit.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide a Settings instance aligned with runtime configuration."""
    return Settings()


@pytest.fixture()
def member(db_session: Session) -> UserProfile:
    """Create the primary test member."""
    return make_profile(db_session, "alice", email="alice@example.org", mobile="+100200300")


@pytest.fixture()
def other_member(db_session: Session) -> UserProfile:
    """Create a second member."""
    return make_profile(db_session, "bob", email="bob@example.org")


@pytest.fixture()
def moderator(db_session: Session) -> UserProfile:
    """Create a member holding the moderator role."""
    profile = make_profile(db_session, "mod")
    SqlRoleDirectory(db_session).add_to_role("mod", "moderator")
    db_session.commit()
    return profile


@pytest.fixture()
def member_headers(member: UserProfile) -> dict[str, str]:
    """Return identity headers for the primary test member."""
    return {"X-User-Id": str(member.id)}


@pytest.fixture()
def other_member_headers(other_member: UserProfile) -> dict[str, str]:
    """Return identity headers for the second member."""
    return {"X-User-Id": str(other_member.id)}


@pytest.fixture()
def moderator_headers(moderator: UserProfile) -> dict[str, str]:
    """Return identity headers for the moderator."""
    return {"X-User-Id": str(moderator.id)}


@pytest.fixture()
def section(db_session: Session) -> Section:
    """Create a default test section."""
    return make_section(db_session, "General")


@pytest.fixture()
def theme(db_session: Session, section: Section, member: UserProfile) -> Theme:
    """Create a topic opened by the primary member."""
    return make_theme(db_session, section, member, "Welcome")
