from cashbook.application.ports.oauth import (
    InvalidOAuthStateError,
    OAuthError,
    OAuthProfile,
    OAuthProvider,
)

__all__ = [
    "InvalidOAuthStateError",
    "OAuthError",
    "OAuthProfile",
    "OAuthProvider",
]
