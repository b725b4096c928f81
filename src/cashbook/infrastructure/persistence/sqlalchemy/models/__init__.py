"""SQLAlchemy models. Importing this package registers every table."""

from cashbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from cashbook.infrastructure.persistence.sqlalchemy.models.movement_model import (
    MovementModel,
)
from cashbook.infrastructure.persistence.sqlalchemy.models.session_model import (
    SessionModel,
)
from cashbook.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "MovementModel",
    "SessionModel",
    "TimestampMixin",
    "UserModel",
]
