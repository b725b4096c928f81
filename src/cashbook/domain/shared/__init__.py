from cashbook.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from cashbook.domain.shared.time import (
    ensure_tz_aware,
    parse_iso_datetime,
    to_utc,
    today_utc,
    utc_now,
)

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "UnauthorizedError",
    "ValidationError",
    "ensure_tz_aware",
    "parse_iso_datetime",
    "to_utc",
    "today_utc",
    "utc_now",
]
