"""OAuth provider port for application layer.

Keeps the login flow independent of the HTTP client and the provider's
API contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from cashbook.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)


class OAuthError(DomainException):
    """The OAuth provider could not complete the login."""

    def __init__(
        self,
        message: str = "Login with the identity provider failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.OAUTH_PROVIDER_ERROR, details)


class InvalidOAuthStateError(ValidationError):
    """Callback state does not match the one issued at login."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid OAuth state",
            code=ErrorCode.INVALID_OAUTH_STATE,
        )


@dataclass(frozen=True)
class OAuthProfile:
    """Identity returned by the provider after a successful login."""

    provider_id: str
    name: str
    email: str
    image: str | None = None


class OAuthProvider(ABC):
    """Abstract OAuth 2.0 authorization-code provider."""

    @abstractmethod
    def authorization_url(self, state: str) -> str:
        """URL the browser is redirected to in order to log in."""

    @abstractmethod
    async def fetch_profile(self, code: str) -> OAuthProfile:
        """Exchange an authorization code for the user's profile.

        Raises OAuthError when the provider rejects the code or is
        unreachable.
        """
