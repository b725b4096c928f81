from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from cashbook.domain.shared.time import ensure_tz_aware, utc_now


@dataclass(frozen=True)
class AuthSession:
    """A login session. Only the SHA-256 hash of its token is kept."""

    user_id: UUID
    token_hash: str
    expires_at: datetime
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    def is_expired(self, now: datetime) -> bool:
        return ensure_tz_aware(now) >= ensure_tz_aware(self.expires_at)
