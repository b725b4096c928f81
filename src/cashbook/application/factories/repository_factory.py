"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from cashbook.domain.movement import MovementRepository
from cashbook.domain.session import SessionRepository
from cashbook.domain.user import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def movement_repository(self) -> MovementRepository:
        """Get movement repository."""
        ...

    def session_repository(self) -> SessionRepository:
        """Get login session repository."""
        ...
