"""Movement repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from cashbook.domain.movement.movement import Movement, MovementType, MovementView


class MovementRepository(ABC):
    """Repository interface for Movement aggregates."""

    @abstractmethod
    async def save(self, movement: Movement) -> None:
        """Persist a new movement."""

    @abstractmethod
    async def find_view_by_id(self, movement_id: UUID) -> MovementView | None:
        """Find a movement joined with its owner."""

    @abstractmethod
    async def list_page(
        self,
        movement_type: MovementType | None = None,
        offset: int = 0,
        limit: int = 50,
    ) -> tuple[list[MovementView], int]:
        """Return one page of movements (newest first) and the total count."""

    @abstractmethod
    async def list_views(self) -> list[MovementView]:
        """Return every movement with its owner, newest first."""

    @abstractmethod
    async def find_all(self) -> list[Movement]:
        """Return every movement, oldest first."""
