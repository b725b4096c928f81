"""Movement domain: income and expense records."""

from cashbook.domain.movement.movement import (
    CONCEPT_MAX_LENGTH,
    MAX_AMOUNT,
    Movement,
    MovementType,
    MovementView,
    to_cents,
)
from cashbook.domain.movement.repository import MovementRepository

__all__ = [
    "CONCEPT_MAX_LENGTH",
    "MAX_AMOUNT",
    "Movement",
    "MovementRepository",
    "MovementType",
    "MovementView",
    "to_cents",
]
