"""GitHub OAuth client - authorization-code flow over httpx."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from cashbook.application.ports import OAuthError, OAuthProfile, OAuthProvider

logger = logging.getLogger(__name__)

GITHUB_SCOPE = "read:user user:email"


class GitHubTokenResponse(BaseModel):
    access_token: str | None = None
    token_type: str | None = None
    error: str | None = None
    error_description: str | None = None


class GitHubUser(BaseModel):
    id: int
    login: str
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None


class GitHubEmail(BaseModel):
    email: str
    primary: bool = False
    verified: bool = False


class GitHubOAuthClient(OAuthProvider):
    """Exchanges GitHub authorization codes for user profiles.

    Every failure talking to GitHub (network, non-2xx, malformed payload,
    missing email) is reported as ``OAuthError``.
    """

    def __init__(  # noqa: PLR0913
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        oauth_base_url: str = "https://github.com",
        api_base_url: str = "https://api.github.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._oauth_base_url = oauth_base_url.rstrip("/")
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def authorization_url(self, state: str) -> str:
        query = urlencode(
            {
                "client_id": self._client_id,
                "redirect_uri": self._redirect_uri,
                "scope": GITHUB_SCOPE,
                "state": state,
            },
        )
        return f"{self._oauth_base_url}/login/oauth/authorize?{query}"

    async def fetch_profile(self, code: str) -> OAuthProfile:
        try:
            access_token = await self._exchange_code(code)
            user = await self._get_user(access_token)
            email = user.email or await self._get_primary_email(access_token)
        except httpx.TimeoutException as e:
            logger.warning("GitHub timeout: %s", e)
            raise OAuthError() from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "GitHub returned error %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            raise OAuthError() from e
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed: %s", e)
            raise OAuthError() from e
        except ValidationError as e:
            logger.warning("Unexpected GitHub payload: %s", e)
            raise OAuthError() from e

        if not email:
            logger.warning("GitHub user %s has no verified email", user.login)
            raise OAuthError("Your GitHub account has no verified email address")

        return OAuthProfile(
            provider_id=str(user.id),
            name=user.name or user.login,
            email=email,
            image=user.avatar_url,
        )

    async def _exchange_code(self, code: str) -> str:
        client = self._get_client()
        response = await client.post(
            f"{self._oauth_base_url}/login/oauth/access_token",
            data={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "code": code,
                "redirect_uri": self._redirect_uri,
            },
        )
        response.raise_for_status()
        token = GitHubTokenResponse.model_validate(response.json())
        if token.error or not token.access_token:
            logger.warning(
                "GitHub rejected authorization code: %s",
                token.error_description or token.error,
            )
            raise OAuthError()
        return token.access_token

    async def _get_user(self, access_token: str) -> GitHubUser:
        client = self._get_client()
        response = await client.get(
            f"{self._api_base_url}/user",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        response.raise_for_status()
        return GitHubUser.model_validate(response.json())

    async def _get_primary_email(self, access_token: str) -> str | None:
        client = self._get_client()
        response = await client.get(
            f"{self._api_base_url}/user/emails",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        response.raise_for_status()
        emails = [GitHubEmail.model_validate(item) for item in response.json()]
        for entry in emails:
            if entry.primary and entry.verified:
                return entry.email
        return None
