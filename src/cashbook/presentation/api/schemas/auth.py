"""Session and current-user schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from cashbook.application.context import AuthUser, SessionData


class MeResponse(BaseModel):
    """The authenticated user."""

    id: UUID
    name: str
    email: str
    image: str | None = None
    role: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "image": "https://avatars.githubusercontent.com/u/1",
                "role": "ADMIN",
            },
        },
    )

    @classmethod
    def from_auth_user(cls, user: AuthUser) -> "MeResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            role=user.role.value,
        )


class SessionResponse(BaseModel):
    user: MeResponse
    expires: datetime

    @classmethod
    def from_session(cls, session: SessionData) -> "SessionResponse":
        return cls(
            user=MeResponse.from_auth_user(session.user),
            expires=session.session.expires_at,
        )


class NavigationItem(BaseModel):
    path: str
    label: str


class NavigationResponse(BaseModel):
    """Pages the current user may open, in menu order."""

    items: list[NavigationItem]


class PageAccessResponse(BaseModel):
    """Route-guard decision for one client page."""

    path: str
    decision: str
    allowed: bool
