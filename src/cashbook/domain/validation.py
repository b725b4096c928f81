"""Input validation for movements and user updates.

Both validators collect every violation instead of stopping at the first
one, so a client gets the complete list of problems in a single response.
The same functions back the API routers and can be reused by any other
entry point that accepts raw input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping

from cashbook.domain.movement import (
    CONCEPT_MAX_LENGTH,
    MAX_AMOUNT,
    MovementType,
    to_cents,
)
from cashbook.domain.shared.time import parse_iso_datetime
from cashbook.domain.user import UserRole

CONCEPT_MIN_LENGTH = 3
NAME_MIN_LENGTH = 2
# users.name is String(255)
NAME_MAX_LENGTH = 255

_MOVEMENT_TYPES = tuple(t.value for t in MovementType)
_USER_ROLES = tuple(r.value for r in UserRole)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation run."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def _is_date(value: Any) -> bool:
    if isinstance(value, date):
        return True
    if not isinstance(value, str):
        return False
    try:
        parse_iso_datetime(value)
    except (ValueError, OverflowError):
        return False
    return True


def _check_concept(value: Any, errors: list[str]) -> None:
    if not isinstance(value, str) or not value.strip():
        errors.append("Concept is required")
    elif len(value.strip()) < CONCEPT_MIN_LENGTH:
        errors.append(f"Concept must be at least {CONCEPT_MIN_LENGTH} characters")
    elif len(value.strip()) > CONCEPT_MAX_LENGTH:
        errors.append(f"Concept must be at most {CONCEPT_MAX_LENGTH} characters")


def _check_amount(value: Any, errors: list[str]) -> None:
    if value is None:
        errors.append("Amount is required")
    elif not _is_number(value):
        errors.append("Amount must be a valid number")
    elif value <= 0:
        errors.append("Amount must be greater than 0")
    elif value > MAX_AMOUNT or to_cents(value) > MAX_AMOUNT:
        errors.append(f"Amount must be at most {MAX_AMOUNT}")
    elif to_cents(value) <= 0:
        # Stored with two decimals, so 0.004 would become 0.00
        errors.append("Amount must be greater than 0")


def _check_type(value: Any, errors: list[str]) -> None:
    if not value:
        errors.append("Type is required")
    elif value not in _MOVEMENT_TYPES:
        errors.append("Type must be INCOME or EXPENSE")


def _check_date(value: Any, errors: list[str]) -> None:
    if value is None or value == "":
        errors.append("Date is required")
    elif not _is_date(value):
        errors.append("Date is invalid")


def validate_movement(data: Mapping[str, Any]) -> ValidationResult:
    """Validate the fields of a new movement.

    Checks concept, amount, type and date in that order; every check runs.
    """
    errors: list[str] = []

    _check_concept(data.get("concept"), errors)
    _check_amount(data.get("amount"), errors)
    _check_type(data.get("type"), errors)
    _check_date(data.get("date"), errors)

    return ValidationResult(errors=errors)


def validate_user_update(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a partial user update.

    Only keys present in ``data`` are checked, so an empty mapping is valid.
    """
    errors: list[str] = []

    if "name" in data:
        name = data["name"]
        if not isinstance(name, str) or not name.strip():
            errors.append("Name cannot be empty")
        elif len(name.strip()) < NAME_MIN_LENGTH:
            errors.append(f"Name must be at least {NAME_MIN_LENGTH} characters")
        elif len(name.strip()) > NAME_MAX_LENGTH:
            errors.append(f"Name must be at most {NAME_MAX_LENGTH} characters")

    if "role" in data and data["role"] not in _USER_ROLES:
        errors.append("Role must be USER or ADMIN")

    return ValidationResult(errors=errors)
