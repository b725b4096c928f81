from cashbook.application.policies.access_policy import (
    ADMIN_ONLY,
    PAGES,
    AccessDecision,
    Page,
    authorize,
    can_access_page,
    visible_pages,
)

__all__ = [
    "ADMIN_ONLY",
    "PAGES",
    "AccessDecision",
    "Page",
    "authorize",
    "can_access_page",
    "visible_pages",
]
