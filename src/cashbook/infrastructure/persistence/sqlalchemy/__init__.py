from cashbook.infrastructure.persistence.sqlalchemy.database import Database
from cashbook.infrastructure.persistence.sqlalchemy.repositories import (
    MovementRepositorySQLAlchemy,
    SessionRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Database",
    "MovementRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "SessionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
