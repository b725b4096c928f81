"""
Pytest fixtures for persistence tests.

Each test gets a fresh SQLite database file with all tables created.
"""

import pytest_asyncio

from cashbook.domain.user import User, UserRole
from cashbook.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'cashbook.db'}")
    await database.create_tables()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def factory(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session)


@pytest_asyncio.fixture
async def admin_user(factory) -> User:
    user = User.create(name="Ada Admin", email="ada@example.com", role=UserRole.ADMIN)
    await factory.user_repository().save(user)
    await factory.session.commit()
    return user
