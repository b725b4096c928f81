"""Integration tests for MovementRepositorySQLAlchemy."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from cashbook.domain.movement import Movement, MovementType

pytestmark = pytest.mark.integration

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _add(repo, user, concept, amount, movement_type, days):
    movement = Movement.create(
        concept=concept,
        amount=Decimal(amount),
        type=movement_type,
        date=START + timedelta(days=days),
        user_id=user.id,
    )
    await repo.save(movement)
    return movement


class TestMovementRepositorySQLAlchemy:
    """Test suite for MovementRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find_view(self, factory, admin_user):
        repo = factory.movement_repository()
        movement = await _add(repo, admin_user, "Salary", "1500.25", MovementType.INCOME, 0)

        view = await repo.find_view_by_id(movement.id)

        assert view.concept == "Salary"
        assert view.amount == Decimal("1500.25")
        assert view.type == MovementType.INCOME
        assert view.user_name == "Ada Admin"
        assert view.date == START

    @pytest.mark.asyncio
    async def test_list_page_newest_first_with_total(self, factory, admin_user):
        repo = factory.movement_repository()
        for day in range(5):
            await _add(repo, admin_user, f"Item {day}", "10", MovementType.EXPENSE, day)

        first_page, total = await repo.list_page(offset=0, limit=2)
        second_page, _ = await repo.list_page(offset=2, limit=2)

        assert total == 5
        assert [v.concept for v in first_page] == ["Item 4", "Item 3"]
        assert [v.concept for v in second_page] == ["Item 2", "Item 1"]

    @pytest.mark.asyncio
    async def test_list_page_type_filter(self, factory, admin_user):
        repo = factory.movement_repository()
        await _add(repo, admin_user, "Salary", "100", MovementType.INCOME, 0)
        await _add(repo, admin_user, "Rent", "50", MovementType.EXPENSE, 1)
        await _add(repo, admin_user, "Bonus", "20", MovementType.INCOME, 2)

        views, total = await repo.list_page(movement_type=MovementType.INCOME)

        assert total == 2
        assert {v.concept for v in views} == {"Salary", "Bonus"}

    @pytest.mark.asyncio
    async def test_find_all_oldest_first(self, factory, admin_user):
        repo = factory.movement_repository()
        await _add(repo, admin_user, "Later", "1", MovementType.INCOME, 3)
        await _add(repo, admin_user, "Earlier", "1", MovementType.INCOME, 1)

        movements = await repo.find_all()

        assert [m.concept for m in movements] == ["Earlier", "Later"]
        assert all(m.date.tzinfo is not None for m in movements)

    @pytest.mark.asyncio
    async def test_list_views_newest_first(self, factory, admin_user):
        repo = factory.movement_repository()
        await _add(repo, admin_user, "Earlier", "1", MovementType.INCOME, 1)
        await _add(repo, admin_user, "Later", "1", MovementType.INCOME, 3)

        assert [v.concept for v in await repo.list_views()] == ["Later", "Earlier"]
