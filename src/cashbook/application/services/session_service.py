"""Login sessions: issue, resolve and revoke opaque session tokens."""

from __future__ import annotations

import hashlib
import logging
import secrets
from datetime import timedelta
from typing import TYPE_CHECKING

from cashbook.application.context import SessionData
from cashbook.domain.session import AuthSession, SessionRepository
from cashbook.domain.shared.time import utc_now
from cashbook.domain.user import User, UserRepository

if TYPE_CHECKING:
    from cashbook.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SessionService:
    """Bridges stored sessions to the request-scoped ``SessionData``."""

    def __init__(
        self,
        session_repository: SessionRepository,
        user_repository: UserRepository,
        session_ttl: timedelta = timedelta(days=7),
    ):
        self._session_repo = session_repository
        self._user_repo = user_repository
        self._session_ttl = session_ttl

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        session_ttl: timedelta = timedelta(days=7),
    ) -> SessionService:
        return cls(
            session_repository=factory.session_repository(),
            user_repository=factory.user_repository(),
            session_ttl=session_ttl,
        )

    @staticmethod
    def hash_token(raw_token: str) -> str:
        return hashlib.sha256(raw_token.encode()).hexdigest()

    async def create_session(self, user: User) -> tuple[str, SessionData]:
        """Start a session for ``user``. Returns the raw token and its data."""
        raw_token = secrets.token_urlsafe(32)
        session = AuthSession(
            user_id=user.id,
            token_hash=self.hash_token(raw_token),
            expires_at=utc_now() + self._session_ttl,
        )
        await self._session_repo.save(session)
        logger.info("Session started for %s", user.email)
        return raw_token, SessionData.create(user, session)

    async def resolve(self, raw_token: str | None) -> SessionData | None:
        """Return the session for a token, or None if there is no valid one.

        Store failures are not caught here; they surface as server errors.
        """
        if not raw_token:
            return None

        token_hash = self.hash_token(raw_token)
        session = await self._session_repo.find_by_token_hash(token_hash)
        if session is None:
            return None

        if session.is_expired(utc_now()):
            logger.debug("Expired session %s discarded", session.id)
            await self._session_repo.delete_by_token_hash(token_hash)
            return None

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None:
            logger.warning("Session %s points to a missing user", session.id)
            return None

        return SessionData.create(user, session)

    async def revoke(self, raw_token: str | None) -> None:
        if not raw_token:
            return
        await self._session_repo.delete_by_token_hash(self.hash_token(raw_token))
