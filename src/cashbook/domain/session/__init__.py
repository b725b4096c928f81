from cashbook.domain.session.repository import SessionRepository
from cashbook.domain.session.session import AuthSession

__all__ = ["AuthSession", "SessionRepository"]
