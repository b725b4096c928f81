"""List movements page by page, newest first."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from cashbook.application.dtos import MovementPage
from cashbook.domain.movement import MovementRepository, MovementType, MovementView

if TYPE_CHECKING:
    from cashbook.application.factories import RepositoryFactory

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


def _parse_type(value: Optional[str]) -> MovementType | None:
    # Unknown filter values are ignored rather than rejected
    if value in (MovementType.INCOME.value, MovementType.EXPENSE.value):
        return MovementType(value)
    return None


class ListMovementsQuery:
    """List movements with optional type filter and pagination."""

    def __init__(self, movement_repository: MovementRepository):
        self._movement_repo = movement_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListMovementsQuery:
        return cls(movement_repository=factory.movement_repository())

    async def execute(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        type_filter: Optional[str] = None,
    ) -> MovementPage:
        page = max(1, page)
        limit = min(MAX_PAGE_SIZE, max(1, limit))

        movements, total = await self._movement_repo.list_page(
            movement_type=_parse_type(type_filter),
            offset=(page - 1) * limit,
            limit=limit,
        )
        return MovementPage(movements=movements, total=total, page=page, limit=limit)

    async def all(self) -> list[MovementView]:
        """Every movement with its owner, newest first (used for exports)."""
        return await self._movement_repo.list_views()
