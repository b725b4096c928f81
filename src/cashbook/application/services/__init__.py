from cashbook.application.services.login_service import OAuthLoginService
from cashbook.application.services.session_service import SessionService

__all__ = ["OAuthLoginService", "SessionService"]
