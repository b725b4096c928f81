"""SQLAlchemy implementation of SessionRepository."""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cashbook.domain.session import AuthSession, SessionRepository
from cashbook.domain.shared.time import ensure_tz_aware
from cashbook.infrastructure.persistence.sqlalchemy.models import SessionModel


class SessionRepositorySQLAlchemy(SessionRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, session: AuthSession) -> None:
        model = SessionModel(
            id=session.id,
            user_id=session.user_id,
            token_hash=session.token_hash,
            expires_at=session.expires_at,
            created_at=session.created_at,
        )
        self._session.add(model)
        await self._session.flush()

    async def find_by_token_hash(self, token_hash: str) -> AuthSession | None:
        stmt = select(SessionModel).where(SessionModel.token_hash == token_hash)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return AuthSession(
            id=model.id,
            user_id=model.user_id,
            token_hash=model.token_hash,
            expires_at=ensure_tz_aware(model.expires_at),
            created_at=ensure_tz_aware(model.created_at),
        )

    async def delete_by_token_hash(self, token_hash: str) -> None:
        stmt = delete(SessionModel).where(SessionModel.token_hash == token_hash)
        await self._session.execute(stmt)
        await self._session.flush()

    async def delete_expired(self, now: datetime) -> int:
        stmt = delete(SessionModel).where(SessionModel.expires_at <= now)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore
