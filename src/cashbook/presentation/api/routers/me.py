"""Current-user endpoints: profile, navigation and page access."""

from fastapi import APIRouter

from cashbook.application.policies import (
    AccessDecision,
    can_access_page,
    visible_pages,
)
from cashbook.presentation.api.dependencies import (
    AuthenticatedSession,
    OptionalSession,
)
from cashbook.presentation.api.schemas import (
    MeResponse,
    NavigationItem,
    NavigationResponse,
    PageAccessResponse,
)

router = APIRouter()


@router.get("/me", summary="Current user")
async def get_me(session: AuthenticatedSession) -> MeResponse:
    return MeResponse.from_auth_user(session.user)


@router.get("/me/navigation", summary="Navigation for the current user")
async def get_navigation(session: AuthenticatedSession) -> NavigationResponse:
    """Menu entries the caller's role may open, in display order."""
    return NavigationResponse(
        items=[
            NavigationItem(path=page.path, label=page.label)
            for page in visible_pages(session)
        ],
    )


@router.get("/navigation/access", summary="Check access to a client page")
async def check_page_access(session: OptionalSession, path: str) -> PageAccessResponse:
    """Route-guard decision for a client page, usable without a session."""
    decision = can_access_page(session, path)
    return PageAccessResponse(
        path=path,
        decision=decision.value,
        allowed=decision == AccessDecision.ALLOW,
    )
