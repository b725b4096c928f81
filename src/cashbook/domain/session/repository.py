from abc import ABC, abstractmethod
from datetime import datetime

from cashbook.domain.session.session import AuthSession


class SessionRepository(ABC):
    @abstractmethod
    async def save(self, session: AuthSession) -> None:
        pass

    @abstractmethod
    async def find_by_token_hash(self, token_hash: str) -> AuthSession | None:
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> None:
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        pass
