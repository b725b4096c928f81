from __future__ import annotations

import logging

from cashbook.application.context import SessionData
from cashbook.application.ports import OAuthProfile, OAuthProvider
from cashbook.application.services.session_service import SessionService
from cashbook.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class OAuthLoginService:
    """Completes an OAuth login: upserts the user and opens a session.

    Users are matched by provider id first, then by email, so accounts that
    existed before being linked keep their role. New users start as USER.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        session_service: SessionService,
        oauth_provider: OAuthProvider,
    ):
        self._user_repo = user_repository
        self._session_service = session_service
        self._oauth_provider = oauth_provider

    async def login(self, code: str) -> tuple[str, SessionData]:
        profile = await self._oauth_provider.fetch_profile(code)
        user = await self._find_or_create(profile)
        return await self._session_service.create_session(user)

    async def _find_or_create(self, profile: OAuthProfile) -> User:
        user = await self._user_repo.find_by_github_id(profile.provider_id)
        if user is None:
            user = await self._user_repo.find_by_email(profile.email)

        if user is None:
            user = User.create(
                name=profile.name,
                email=profile.email,
                image=profile.image,
                github_id=profile.provider_id,
            )
            logger.info("Registered new user %s via OAuth", user.email)
        else:
            user.refresh_profile(image=profile.image, github_id=profile.provider_id)

        await self._user_repo.save(user)
        return user
