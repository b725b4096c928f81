"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cashbook import __version__
from cashbook.infrastructure.auth import GitHubOAuthClient
from cashbook.infrastructure.persistence.sqlalchemy import Database
from cashbook.presentation.api.exception_handlers import setup_exception_handlers
from cashbook.presentation.api.routers import (
    auth_router,
    me_router,
    movements_router,
    reports_router,
    users_router,
)
from cashbook.presentation.api.schemas import HealthResponse
from cashbook_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for cashbook modules and WARNING for noisy third-party libraries.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("cashbook").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login with GitHub and session management.

**Sessions:**
- Opaque token in the `cashbook_session` HttpOnly cookie
- Or sent as `Authorization: Bearer <token>`
- Only a SHA-256 hash of the token is stored
""",
    },
    {
        "name": "Me",
        "description": "The current user and the pages their role may open.",
    },
    {
        "name": "Movements",
        "description": """Income and expense records.

**Access:**
- Any logged-in user can list movements
- Only administrators can create them
""",
    },
    {
        "name": "Users",
        "description": "User administration (administrators only).",
    },
    {
        "name": "Reports",
        "description": """Balance, totals and monthly breakdown (administrators only).

- `/reports` - report as JSON
- `/reports/csv` - all movements as a semicolon-separated CSV file
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own the database handle and the OAuth client for the app's lifetime."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

    database = Database(settings.database_url)
    await _init_database_schema(database)
    oauth_provider = GitHubOAuthClient(
        client_id=settings.github_client_id,
        client_secret=settings.github_client_secret.get_secret_value(),
        redirect_uri=settings.github_redirect_uri,
        oauth_base_url=settings.github_oauth_base_url,
        api_base_url=settings.github_api_base_url,
        timeout=settings.github_timeout,
    )
    app.state.database = database
    app.state.oauth_provider = oauth_provider

    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await oauth_provider.close()
    await database.dispose()


async def _init_database_schema(database: Database) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await database.create_tables()
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(me_router, tags=["Me"])
    v1_router.include_router(movements_router, prefix="/movements", tags=["Movements"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(reports_router, prefix="/reports", tags=["Reports"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Income and expense tracking with role-based reports.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Unversioned for load balancer/monitoring compatibility."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
