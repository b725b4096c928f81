"""Role-based access policy.

Single source of truth for who may reach what. The API gate calls
``authorize`` for every protected route, and the navigation endpoint uses
``visible_pages`` so that menu entries and route guards never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Collection

from cashbook.application.context import SessionData
from cashbook.domain.user import UserRole

ADMIN_ONLY: frozenset[UserRole] = frozenset({UserRole.ADMIN})


class AccessDecision(str, Enum):
    """Result of an authorization check."""

    ALLOW = "allow"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


def authorize(
    session: SessionData | None,
    required_roles: Collection[UserRole] | None = None,
) -> AccessDecision:
    """Decide whether a caller may proceed.

    A missing session is always UNAUTHORIZED, whatever the route requires.
    ``required_roles=None`` means any authenticated user is allowed.
    """
    if session is None:
        return AccessDecision.UNAUTHORIZED
    if required_roles is not None and session.user.role not in required_roles:
        return AccessDecision.FORBIDDEN
    return AccessDecision.ALLOW


@dataclass(frozen=True)
class Page:
    """A navigable page of the web client."""

    path: str
    label: str
    required_roles: frozenset[UserRole] | None = None


PAGES: tuple[Page, ...] = (
    Page(path="/", label="Dashboard"),
    Page(path="/movements", label="Movements"),
    Page(path="/users", label="Users", required_roles=ADMIN_ONLY),
    Page(path="/reports", label="Reports", required_roles=ADMIN_ONLY),
)


def visible_pages(session: SessionData | None) -> list[Page]:
    """Pages the caller may open, in menu order."""
    return [
        page
        for page in PAGES
        if authorize(session, page.required_roles) == AccessDecision.ALLOW
    ]


def can_access_page(session: SessionData | None, path: str) -> AccessDecision:
    """Route-guard check for a client page. Unknown paths need a session only."""
    for page in PAGES:
        if page.path == path:
            return authorize(session, page.required_roles)
    return authorize(session)
