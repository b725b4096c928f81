"""Pydantic schemas for API request/response models."""

from cashbook.presentation.api.schemas.auth import (
    MeResponse,
    NavigationItem,
    NavigationResponse,
    PageAccessResponse,
    SessionResponse,
)
from cashbook.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    ValidationErrorResponse,
)
from cashbook.presentation.api.schemas.movements import (
    MovementListResponse,
    MovementResponse,
    MovementUserResponse,
)
from cashbook.presentation.api.schemas.reports import (
    MonthlyDataResponse,
    ReportResponse,
)
from cashbook.presentation.api.schemas.users import (
    UpdatedUserResponse,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MeResponse",
    "MonthlyDataResponse",
    "MovementListResponse",
    "MovementResponse",
    "MovementUserResponse",
    "NavigationItem",
    "NavigationResponse",
    "PageAccessResponse",
    "ReportResponse",
    "SessionResponse",
    "UpdatedUserResponse",
    "UserListResponse",
    "UserResponse",
    "ValidationErrorResponse",
]
