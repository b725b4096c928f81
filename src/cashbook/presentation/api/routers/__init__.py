"""API routers."""

from cashbook.presentation.api.routers.auth import router as auth_router
from cashbook.presentation.api.routers.me import router as me_router
from cashbook.presentation.api.routers.movements import router as movements_router
from cashbook.presentation.api.routers.reports import router as reports_router
from cashbook.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "me_router",
    "movements_router",
    "reports_router",
    "users_router",
]
