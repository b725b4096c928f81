"""Request-scoped session identity handed explicitly to every handler."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from cashbook.domain.user import UserRole

if TYPE_CHECKING:
    from cashbook.domain.session import AuthSession
    from cashbook.domain.user import User


@dataclass(frozen=True)
class AuthUser:
    """The authenticated user as seen by handlers."""

    id: UUID
    name: str
    email: str
    image: str | None
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def create(cls, user: User) -> AuthUser:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            role=user.role,
        )


@dataclass(frozen=True)
class SessionInfo:
    id: UUID
    expires_at: datetime


@dataclass(frozen=True)
class SessionData:
    """Immutable context for the current authenticated request."""

    user: AuthUser
    session: SessionInfo

    @classmethod
    def create(cls, user: User, session: AuthSession) -> SessionData:
        return cls(
            user=AuthUser.create(user),
            session=SessionInfo(id=session.id, expires_at=session.expires_at),
        )

    def __str__(self) -> str:
        return f"SessionData({self.user.email})"
