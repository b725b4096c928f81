"""SQLAlchemy implementation of MovementRepository."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cashbook.domain.movement import (
    Movement,
    MovementRepository,
    MovementType,
    MovementView,
)
from cashbook.domain.shared.time import ensure_tz_aware
from cashbook.infrastructure.persistence.sqlalchemy.models import (
    MovementModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class MovementRepositorySQLAlchemy(MovementRepository):
    """Movements are read joined with their owner's name."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, movement: Movement) -> None:
        self._session.add(self._map_to_model(movement))
        await self._session.flush()
        logger.debug("Saved movement: %s", movement.id)

    async def find_view_by_id(self, movement_id: UUID) -> MovementView | None:
        stmt = self._view_select().where(MovementModel.id == movement_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return self._map_to_view(row)

    async def list_page(
        self,
        movement_type: MovementType | None = None,
        offset: int = 0,
        limit: int = 50,
    ) -> tuple[list[MovementView], int]:
        stmt = self._view_select()
        count_stmt = select(func.count()).select_from(MovementModel)
        if movement_type is not None:
            stmt = stmt.where(MovementModel.type == movement_type.value)
            count_stmt = count_stmt.where(MovementModel.type == movement_type.value)

        stmt = self._newest_first(stmt).offset(offset).limit(limit)

        result = await self._session.execute(stmt)
        views = [self._map_to_view(row) for row in result.all()]
        total = (await self._session.execute(count_stmt)).scalar_one()
        return views, total

    async def list_views(self) -> list[MovementView]:
        result = await self._session.execute(self._newest_first(self._view_select()))
        return [self._map_to_view(row) for row in result.all()]

    async def find_all(self) -> list[Movement]:
        stmt = select(MovementModel).order_by(
            MovementModel.date,
            MovementModel.created_at,
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _view_select() -> Select[Any]:
        return select(MovementModel, UserModel.name).join(
            UserModel,
            MovementModel.user_id == UserModel.id,
        )

    @staticmethod
    def _newest_first(stmt: Select[Any]) -> Select[Any]:
        return stmt.order_by(
            MovementModel.date.desc(),
            MovementModel.created_at.desc(),
        )

    def _map_to_domain(self, model: MovementModel) -> Movement:
        return Movement(
            id=model.id,
            concept=model.concept,
            amount=model.amount,
            type=model.type,
            date=ensure_tz_aware(model.date),
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _map_to_view(self, row: Any) -> MovementView:
        model, user_name = row
        return MovementView(
            id=model.id,
            concept=model.concept,
            amount=model.amount,
            type=MovementType(model.type),
            date=ensure_tz_aware(model.date),
            user_id=model.user_id,
            user_name=user_name,
        )

    def _map_to_model(self, movement: Movement) -> MovementModel:
        return MovementModel(
            id=movement.id,
            concept=movement.concept,
            amount=movement.amount,
            type=movement.type.value,
            date=movement.date,
            user_id=movement.user_id,
            created_at=movement.created_at,
        )
