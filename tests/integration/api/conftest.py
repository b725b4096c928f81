"""Pytest fixtures for API integration tests.

The app runs its real lifespan against a throwaway SQLite file. Users and
sessions are seeded before the client starts, so tests authenticate with
known raw tokens instead of going through GitHub.
"""

import asyncio
from dataclasses import dataclass
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from cashbook.application.ports import OAuthError, OAuthProfile, OAuthProvider
from cashbook.application.services import SessionService
from cashbook.domain.session import AuthSession
from cashbook.domain.shared.time import utc_now
from cashbook.domain.user import User, UserRole
from cashbook.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)
from cashbook.presentation.api.app import API_V1_PREFIX, create_app
from cashbook.presentation.api.dependencies import get_oauth_provider
from cashbook_config.settings import Settings

ADMIN_TOKEN = "admin-session-token"
USER_TOKEN = "user-session-token"
EXPIRED_TOKEN = "expired-session-token"

FRONTEND_URL = "http://localhost:3000"


class FakeOAuthProvider(OAuthProvider):
    """Stands in for GitHub. The code ``bad-code`` is rejected."""

    def __init__(self, profile: OAuthProfile):
        self.profile = profile
        self.codes: list[str] = []

    def authorization_url(self, state: str) -> str:
        return f"https://github.test/login/oauth/authorize?state={state}"

    async def fetch_profile(self, code: str) -> OAuthProfile:
        self.codes.append(code)
        if code == "bad-code":
            raise OAuthError
        return self.profile


@dataclass
class SeededUsers:
    admin: User
    user: User


async def _seed(database_url: str) -> SeededUsers:
    database = Database(database_url)
    try:
        await database.create_tables()
        async with database.session() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            users = factory.user_repository()
            sessions = factory.session_repository()

            admin = User.create(
                name="Ada Admin",
                email="admin@example.com",
                role=UserRole.ADMIN,
            )
            member = User.create(name="Bob User", email="user@example.com")
            await users.save(admin)
            await users.save(member)

            now = utc_now()
            for user, token, expires_at in (
                (admin, ADMIN_TOKEN, now + timedelta(days=7)),
                (member, USER_TOKEN, now + timedelta(days=7)),
                (member, EXPIRED_TOKEN, now - timedelta(minutes=5)),
            ):
                await sessions.save(
                    AuthSession(
                        user_id=user.id,
                        token_hash=SessionService.hash_token(token),
                        expires_at=expires_at,
                    ),
                )
            await session.commit()
    finally:
        await database.dispose()

    return SeededUsers(admin=admin, user=member)


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings backed by a SQLite file."""
    return Settings(
        postgres_password=SecretStr("test-password"),
        github_client_id="test-client-id",
        github_client_secret=SecretStr("test-client-secret"),
        database_url_override=database_url,
        api_debug=True,
        api_cors_origins=FRONTEND_URL,
        api_cookie_secure=False,  # Allow HTTP in tests
        frontend_base_url=FRONTEND_URL,
        session_expire_days=7,
    )


@pytest.fixture
def seeded(database_url) -> SeededUsers:
    return asyncio.run(_seed(database_url))


@pytest.fixture
def oauth_provider() -> FakeOAuthProvider:
    return FakeOAuthProvider(
        OAuthProfile(
            provider_id="4242",
            name="Nia New",
            email="nia@example.com",
            image="https://avatars.test/nia.png",
        ),
    )


@pytest.fixture
def app(api_settings, seeded, oauth_provider):
    app = create_app(settings=api_settings)
    app.dependency_overrides[get_oauth_provider] = lambda: oauth_provider
    return app


@pytest.fixture
def test_client(app):
    """Client with the app's lifespan running (database and OAuth client)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def user_headers() -> dict:
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def admin_token() -> str:
    return ADMIN_TOKEN


@pytest.fixture
def expired_headers() -> dict:
    return {"Authorization": f"Bearer {EXPIRED_TOKEN}"}


@pytest.fixture
def frontend_url(api_settings) -> str:
    return api_settings.frontend_base_url
