"""User domain: identity, roles and the user repository."""

from cashbook.domain.user.exceptions import (
    CannotDemoteSelfError,
    NoUpdatableFieldsError,
    UserNotFoundError,
)
from cashbook.domain.user.repository import UserRepository
from cashbook.domain.user.user import User, UserRole

__all__ = [
    "CannotDemoteSelfError",
    "NoUpdatableFieldsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
