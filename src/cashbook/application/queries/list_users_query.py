from __future__ import annotations

from typing import TYPE_CHECKING

from cashbook.domain.user import User, UserRepository

if TYPE_CHECKING:
    from cashbook.application.factories import RepositoryFactory


class ListUsersQuery:
    """List every user, ordered by name."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self) -> list[User]:
        return await self._user_repo.list_all()
