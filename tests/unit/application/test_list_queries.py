"""Tests for ListMovementsQuery and ListUsersQuery."""

from unittest.mock import AsyncMock

import pytest

from cashbook.application.queries import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListMovementsQuery,
    ListUsersQuery,
)
from cashbook.domain.movement import MovementType
from cashbook.domain.user import User


@pytest.fixture
def movement_repo():
    repo = AsyncMock()
    repo.list_page.return_value = ([], 0)
    return repo


class TestListMovementsQuery:
    """Test suite for ListMovementsQuery."""

    @pytest.mark.asyncio
    async def test_defaults(self, movement_repo):
        result = await ListMovementsQuery(movement_repo).execute()

        movement_repo.list_page.assert_awaited_once_with(
            movement_type=None,
            offset=0,
            limit=DEFAULT_PAGE_SIZE,
        )
        assert result.page == 1
        assert result.limit == DEFAULT_PAGE_SIZE

    @pytest.mark.asyncio
    async def test_offset_from_page(self, movement_repo):
        await ListMovementsQuery(movement_repo).execute(page=3, limit=10)

        movement_repo.list_page.assert_awaited_once_with(
            movement_type=None,
            offset=20,
            limit=10,
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("page", "limit", "expected_page", "expected_limit"),
        [
            (0, 0, 1, 1),
            (-4, 500, 1, MAX_PAGE_SIZE),
            (2, 100, 2, 100),
        ],
    )
    async def test_page_and_limit_are_clamped(
        self,
        movement_repo,
        page,
        limit,
        expected_page,
        expected_limit,
    ):
        result = await ListMovementsQuery(movement_repo).execute(page=page, limit=limit)

        assert result.page == expected_page
        assert result.limit == expected_limit

    @pytest.mark.asyncio
    async def test_type_filter(self, movement_repo):
        await ListMovementsQuery(movement_repo).execute(type_filter="INCOME")

        kwargs = movement_repo.list_page.await_args.kwargs
        assert kwargs["movement_type"] == MovementType.INCOME

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["income", "TRANSFER", ""])
    async def test_invalid_type_filter_is_ignored(self, movement_repo, value):
        await ListMovementsQuery(movement_repo).execute(type_filter=value)

        assert movement_repo.list_page.await_args.kwargs["movement_type"] is None

    @pytest.mark.asyncio
    async def test_all_returns_every_view(self, movement_repo):
        movement_repo.list_views.return_value = ["a", "b"]

        assert await ListMovementsQuery(movement_repo).all() == ["a", "b"]


class TestListUsersQuery:
    @pytest.mark.asyncio
    async def test_returns_repository_order(self):
        users = [
            User.create(name="Ada", email="ada@example.com"),
            User.create(name="Bob", email="bob@example.com"),
        ]
        repo = AsyncMock()
        repo.list_all.return_value = users

        assert await ListUsersQuery(repo).execute() == users
