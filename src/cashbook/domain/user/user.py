"""User aggregate and role value object."""

from datetime import datetime
from enum import Enum
from typing import Union
from uuid import UUID, uuid4

from cashbook.domain.shared.time import utc_now


class UserRole(str, Enum):
    """User roles (who will be admin and who not)."""

    USER = "USER"
    ADMIN = "ADMIN"


class User:
    """
    User aggregate root.

    Identity comes from the OAuth provider. Only ``name`` and ``role`` are
    editable, and only by an administrator.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        role: Union[str, UserRole] = UserRole.USER,
        phone: str | None = None,
        image: str | None = None,
        github_id: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._email = email.strip().lower()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._phone = phone
        self._image = image
        self._github_id = github_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def image(self) -> str | None:
        return self._image

    @property
    def github_id(self) -> str | None:
        return self._github_id

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: str) -> None:
        self._name = name.strip()
        self._updated_at = utc_now()

    def change_role(self, role: UserRole) -> None:
        self._role = role
        self._updated_at = utc_now()

    def promote_to_admin(self) -> None:
        self.change_role(UserRole.ADMIN)

    def demote_to_user(self) -> None:
        self.change_role(UserRole.USER)

    def refresh_profile(self, image: str | None, github_id: str | None) -> None:
        """Sync provider-owned profile fields after a login."""
        self._image = image
        self._github_id = github_id
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        role: UserRole = UserRole.USER,
        image: str | None = None,
        github_id: str | None = None,
    ) -> "User":
        return cls(
            name=name,
            email=email,
            role=role,
            image=image,
            github_id=github_id,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        email: str,
        role: Union[str, UserRole],
        phone: str | None,
        image: str | None,
        github_id: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            role=role,
            phone=phone,
            image=image,
            github_id=github_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email}, role={self._role.value})"
