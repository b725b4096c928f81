"""Authentication router: GitHub OAuth login, logout and session lookup."""

import logging
import secrets
from typing import Annotated

from fastapi import APIRouter, Cookie, Response, status
from fastapi.responses import RedirectResponse

from cashbook.application.ports import InvalidOAuthStateError
from cashbook.application.services import OAuthLoginService
from cashbook.presentation.api.dependencies import (
    SESSION_COOKIE,
    OAuthProviderDep,
    OptionalSession,
    RepoFactory,
    SessionServiceDep,
    SessionToken,
    SettingsDep,
)
from cashbook.presentation.api.schemas import SessionResponse
from cashbook_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Cookie holding the anti-forgery state between login and callback
OAUTH_STATE_COOKIE = "cashbook_oauth_state"
OAUTH_STATE_MAX_AGE = 10 * 60
AUTH_COOKIE_PATH = "/api/v1/auth"


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Set the session token as an HttpOnly cookie."""
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=settings.session_expire_days * 24 * 60 * 60,
        path="/",
        domain=settings.api_cookie_domain,
    )


def _clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE,
        path="/",
        domain=settings.api_cookie_domain,
    )


@router.get(
    "/github/login",
    summary="Start GitHub login",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
)
async def github_login(
    provider: OAuthProviderDep,
    settings: SettingsDep,
) -> RedirectResponse:
    """Redirect the browser to GitHub's authorization page."""
    state = secrets.token_urlsafe(16)
    response = RedirectResponse(
        provider.authorization_url(state),
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )
    response.set_cookie(
        key=OAUTH_STATE_COOKIE,
        value=state,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite="lax",
        max_age=OAUTH_STATE_MAX_AGE,
        path=AUTH_COOKIE_PATH,
        domain=settings.api_cookie_domain,
    )
    return response


@router.get(
    "/github/callback",
    summary="Complete GitHub login",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    responses={
        400: {"description": "Missing code or state mismatch"},
        502: {"description": "GitHub could not complete the login"},
    },
)
async def github_callback(  # noqa: PLR0913
    provider: OAuthProviderDep,
    factory: RepoFactory,
    session_service: SessionServiceDep,
    settings: SettingsDep,
    code: str | None = None,
    state: str | None = None,
    expected_state: Annotated[str | None, Cookie(alias=OAUTH_STATE_COOKIE)] = None,
) -> RedirectResponse:
    """Exchange the code, upsert the user and open a session."""
    if (
        not code
        or not state
        or not expected_state
        or not secrets.compare_digest(state, expected_state)
    ):
        raise InvalidOAuthStateError

    login_service = OAuthLoginService(
        user_repository=factory.user_repository(),
        session_service=session_service,
        oauth_provider=provider,
    )
    try:
        token, session = await login_service.login(code)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("User %s logged in via GitHub", session.user.email)

    response = RedirectResponse(
        settings.frontend_base_url,
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )
    _set_session_cookie(response, token, settings)
    response.delete_cookie(
        key=OAUTH_STATE_COOKIE,
        path=AUTH_COOKIE_PATH,
        domain=settings.api_cookie_domain,
    )
    return response


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Log out",
)
async def logout(
    token: SessionToken,
    factory: RepoFactory,
    session_service: SessionServiceDep,
    settings: SettingsDep,
) -> Response:
    """Revoke the current session (if any) and clear the cookie."""
    await session_service.revoke(token)
    await factory.session.commit()

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    _clear_session_cookie(response, settings)
    return response


@router.get("/session", summary="Current session")
async def get_session(session: OptionalSession) -> SessionResponse | None:
    """The caller's session, or null when not logged in."""
    if session is None:
        return None
    return SessionResponse.from_session(session)
