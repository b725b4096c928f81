"""User management schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from cashbook.domain.user import User


class UserResponse(BaseModel):
    """A user as listed on the administration page."""

    id: UUID
    name: str
    email: str
    phone: str | None = None
    role: str
    image: str | None = None
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
            image=user.image,
            created_at=user.created_at,
        )


class UserListResponse(BaseModel):
    users: list[UserResponse]
    total: int


class UpdatedUserResponse(BaseModel):
    """Response schema after a user update."""

    id: UUID
    name: str
    email: str
    phone: str | None = None
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UpdatedUserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
        )
