"""DTOs for movement listings."""

from dataclasses import dataclass

from cashbook.domain.movement import MovementView


@dataclass(frozen=True)
class MovementPage:
    """One page of movements plus the total number of matching rows."""

    movements: list[MovementView]
    total: int
    page: int
    limit: int
