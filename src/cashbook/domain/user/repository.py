"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from cashbook.domain.user.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_by_github_id(self, github_id: str) -> Optional[User]:
        """Find a user by the id of their linked GitHub account."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users ordered by name."""
