from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping
from uuid import UUID

from cashbook.domain.user import (
    CannotDemoteSelfError,
    NoUpdatableFieldsError,
    User,
    UserRepository,
    UserRole,
)

if TYPE_CHECKING:
    from cashbook.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserChanges:
    """Fields an administrator may change. ``None`` means "leave as is"."""

    name: str | None = None
    role: UserRole | None = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.role is None

    @classmethod
    def from_validated(cls, data: Mapping[str, Any]) -> UserChanges:
        name = data.get("name")
        role = data.get("role")
        return cls(
            name=name.strip() if name is not None else None,
            role=UserRole(role) if role is not None else None,
        )


class UpdateUserCommand:
    """Update a user's name and/or role."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(
        self,
        user: User,
        changes: UserChanges,
        requesting_admin_id: UUID,
    ) -> User:
        if changes.is_empty:
            raise NoUpdatableFieldsError

        if (
            changes.role is not None
            and user.id == requesting_admin_id
            and changes.role != UserRole.ADMIN
        ):
            raise CannotDemoteSelfError

        if changes.name is not None:
            user.rename(changes.name)
        if changes.role is not None and changes.role != user.role:
            user.change_role(changes.role)
            logger.info("Role of %s changed to %s", user.id, changes.role.value)

        await self._user_repo.save(user)
        return user
