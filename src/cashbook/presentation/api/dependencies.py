"""FastAPI dependency injection for the Cashbook API.

Provides dependencies for:
- Database sessions (from the Database handle owned by the app)
- Repository factory
- Session resolution and the role-based session gate
- The OAuth provider
"""

import logging
from datetime import timedelta
from typing import Annotated, AsyncGenerator, Collection

from fastapi import Cookie, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from cashbook.application.context import SessionData
from cashbook.application.policies import ADMIN_ONLY, AccessDecision, authorize
from cashbook.application.ports import OAuthProvider
from cashbook.application.services import SessionService
from cashbook.domain.shared.exceptions import ForbiddenError, UnauthorizedError
from cashbook.domain.user import UserRole
from cashbook.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)
from cashbook.presentation.api.config import get_api_settings
from cashbook_config.settings import Settings

logger = logging.getLogger(__name__)

SESSION_COOKIE = "cashbook_session"

# Security scheme for Bearer session tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


def get_database(request: Request) -> Database:
    """The Database handle created by the application lifespan."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the application's pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with database.session() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Sessions
# -----------------------------------------------------------------------------


def get_session_service(factory: RepoFactory, settings: SettingsDep) -> SessionService:
    return SessionService.from_factory(
        factory,
        session_ttl=timedelta(days=settings.session_expire_days),
    )


SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]


def get_session_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    cookie_token: Annotated[str | None, Cookie(alias=SESSION_COOKIE)] = None,
) -> str | None:
    """Session token from the session cookie or an ``Authorization: Bearer``."""
    if cookie_token:
        return cookie_token
    if credentials is not None:
        return credentials.credentials
    return None


SessionToken = Annotated[str | None, Depends(get_session_token)]


async def get_optional_session(
    token: SessionToken,
    session_service: SessionServiceDep,
    factory: RepoFactory,
) -> SessionData | None:
    """
    Resolve the caller's session, or None when there is no valid one.

    Store failures are not swallowed: they reach the global handler as 500.
    """
    session = await session_service.resolve(token)
    if session is None and token:
        # Persist removal of an expired session
        await factory.session.commit()
    return session


OptionalSession = Annotated[SessionData | None, Depends(get_optional_session)]


class SessionGate:
    """
    Route guard built on the access policy.

    No session gives 401 and a role outside ``required_roles`` gives 403.
    Otherwise the resolved session is handed to the handler.
    """

    def __init__(self, required_roles: Collection[UserRole] | None = None):
        self._required_roles = required_roles

    async def __call__(self, request: Request, session: OptionalSession) -> SessionData:
        decision = authorize(session, self._required_roles)

        if decision == AccessDecision.UNAUTHORIZED:
            raise UnauthorizedError
        if decision == AccessDecision.FORBIDDEN:
            logger.warning(
                "Access denied for %s on %s %s",
                session.user.email if session else None,
                request.method,
                request.url.path,
            )
            raise ForbiddenError

        return session  # type: ignore[return-value]


# Type aliases for guarded handlers
AuthenticatedSession = Annotated[SessionData, Depends(SessionGate())]
AdminSession = Annotated[SessionData, Depends(SessionGate(ADMIN_ONLY))]


# -----------------------------------------------------------------------------
# OAuth provider
# -----------------------------------------------------------------------------


def get_oauth_provider(request: Request) -> OAuthProvider:
    """The OAuth client created by the application lifespan."""
    return request.app.state.oauth_provider


OAuthProviderDep = Annotated[OAuthProvider, Depends(get_oauth_provider)]
