"""SQLAlchemy repository factory bound to a single database session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from cashbook.infrastructure.persistence.sqlalchemy.repositories.movement_repository import (  # noqa: E501
    MovementRepositorySQLAlchemy,
)
from cashbook.infrastructure.persistence.sqlalchemy.repositories.session_repository import (  # noqa: E501
    SessionRepositorySQLAlchemy,
)
from cashbook.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._movement_repo: MovementRepositorySQLAlchemy | None = None
        self._session_repo: SessionRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def movement_repository(self) -> MovementRepositorySQLAlchemy:
        if self._movement_repo is None:
            self._movement_repo = MovementRepositorySQLAlchemy(self._session)
        return self._movement_repo

    def session_repository(self) -> SessionRepositorySQLAlchemy:
        if self._session_repo is None:
            self._session_repo = SessionRepositorySQLAlchemy(self._session)
        return self._session_repo
