from cashbook.application.context.session_context import (
    AuthUser,
    SessionData,
    SessionInfo,
)

__all__ = ["AuthUser", "SessionData", "SessionInfo"]
