"""Tests for the SessionGate dependency and the exception mapping."""

from datetime import timedelta
from unittest.mock import Mock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cashbook.application.context import AuthUser, SessionData, SessionInfo
from cashbook.application.policies import ADMIN_ONLY
from cashbook.domain.shared.exceptions import (
    ConflictError,
    ForbiddenError,
    UnauthorizedError,
)
from cashbook.domain.shared.time import utc_now
from cashbook.domain.user import UserNotFoundError, UserRole
from cashbook.presentation.api.dependencies import SessionGate
from cashbook.presentation.api.exception_handlers import (
    setup_exception_handlers,
    validation_error_response,
)


def _session(role: UserRole) -> SessionData:
    return SessionData(
        user=AuthUser(
            id=uuid4(),
            name="Someone",
            email="someone@example.com",
            image=None,
            role=role,
        ),
        session=SessionInfo(id=uuid4(), expires_at=utc_now() + timedelta(days=1)),
    )


def _request() -> Mock:
    request = Mock()
    request.method = "GET"
    request.url.path = "/api/v1/reports"
    return request


class TestSessionGate:
    """Test suite for SessionGate."""

    @pytest.mark.asyncio
    async def test_missing_session_is_unauthorized(self):
        with pytest.raises(UnauthorizedError):
            await SessionGate()(_request(), None)

    @pytest.mark.asyncio
    async def test_missing_session_on_admin_route_is_unauthorized(self):
        with pytest.raises(UnauthorizedError):
            await SessionGate(ADMIN_ONLY)(_request(), None)

    @pytest.mark.asyncio
    async def test_user_on_admin_route_is_forbidden(self):
        with pytest.raises(ForbiddenError):
            await SessionGate(ADMIN_ONLY)(_request(), _session(UserRole.USER))

    @pytest.mark.asyncio
    async def test_allowed_session_is_passed_through(self):
        session = _session(UserRole.ADMIN)

        assert await SessionGate(ADMIN_ONLY)(_request(), session) is session

    @pytest.mark.asyncio
    async def test_any_role_on_open_route(self):
        session = _session(UserRole.USER)

        assert await SessionGate()(_request(), session) is session


@pytest.fixture
def error_client() -> TestClient:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/unauthorized")
    async def unauthorized():
        raise UnauthorizedError

    @app.get("/forbidden")
    async def forbidden():
        raise ForbiddenError

    @app.get("/missing")
    async def missing():
        raise UserNotFoundError("abc")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Already exists")

    @app.get("/invalid")
    async def invalid():
        return validation_error_response(["Concept is required"])

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    """Domain exceptions map to status codes with a {detail, code} body."""

    def test_unauthorized(self, error_client):
        response = error_client.get("/unauthorized")

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Authentication required",
            "code": "UNAUTHORIZED",
        }
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_forbidden(self, error_client):
        response = error_client.get("/forbidden")

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_not_found(self, error_client):
        response = error_client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found", "code": "USER_NOT_FOUND"}

    def test_conflict(self, error_client):
        assert error_client.get("/conflict").status_code == 409

    def test_validation_error_body(self, error_client):
        response = error_client.get("/invalid")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Invalid data",
            "code": "VALIDATION_ERROR",
            "errors": ["Concept is required"],
        }

    def test_unhandled_error_hides_internals(self, error_client):
        response = error_client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An internal error occurred",
            "code": "INTERNAL_ERROR",
        }
        assert "hunter2" not in response.text
