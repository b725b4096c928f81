from cashbook.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from cashbook.infrastructure.persistence.sqlalchemy.repositories.movement_repository import (  # noqa: E501
    MovementRepositorySQLAlchemy,
)
from cashbook.infrastructure.persistence.sqlalchemy.repositories.session_repository import (  # noqa: E501
    SessionRepositorySQLAlchemy,
)
from cashbook.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "MovementRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "SessionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
