from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping

from cashbook.application.context import AuthUser
from cashbook.domain.movement import (
    Movement,
    MovementRepository,
    MovementType,
    MovementView,
)
from cashbook.domain.shared.time import parse_iso_datetime, to_utc

if TYPE_CHECKING:
    from cashbook.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


def _coerce_date(value: date | str) -> datetime:
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return parse_iso_datetime(value)


@dataclass(frozen=True)
class NewMovement:
    """Typed movement input. Build it only from data that passed validation."""

    concept: str
    amount: Decimal
    type: MovementType
    date: datetime

    @classmethod
    def from_validated(cls, data: Mapping[str, Any]) -> NewMovement:
        return cls(
            concept=str(data["concept"]).strip(),
            amount=Decimal(str(data["amount"])),
            type=MovementType(data["type"]),
            date=_coerce_date(data["date"]),
        )


class CreateMovementCommand:
    """Record a new movement owned by the requesting administrator."""

    def __init__(self, movement_repository: MovementRepository):
        self._movement_repo = movement_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateMovementCommand:
        return cls(movement_repository=factory.movement_repository())

    async def execute(self, new_movement: NewMovement, owner: AuthUser) -> MovementView:
        movement = Movement.create(
            concept=new_movement.concept,
            amount=new_movement.amount,
            type=new_movement.type,
            date=new_movement.date,
            user_id=owner.id,
        )
        await self._movement_repo.save(movement)

        logger.info(
            "Movement %s created by %s (%s %s)",
            movement.id,
            owner.email,
            movement.type.value,
            movement.amount,
        )
        return MovementView(
            id=movement.id,
            concept=movement.concept,
            amount=movement.amount,
            type=movement.type,
            date=movement.date,
            user_id=owner.id,
            user_name=owner.name,
        )
