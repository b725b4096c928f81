"""Movement aggregate: a single income or expense record."""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Union
from uuid import UUID, uuid4

from cashbook.domain.shared.exceptions import ValidationError
from cashbook.domain.shared.time import to_utc, utc_now

# Column limits of the movements table: String(255) and Numeric(14, 2)
CONCEPT_MAX_LENGTH = 255
MAX_AMOUNT = Decimal("999999999999.99")
CENT = Decimal("0.01")


def to_cents(amount: Union[Decimal, int, float, str]) -> Decimal:
    """Round an amount half away from zero to the two stored decimals."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class MovementType(str, Enum):
    """Direction of a movement. The amount itself is always positive."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Movement:
    """
    Movement aggregate root.

    Movements are created by administrators and never modified afterwards,
    so the aggregate exposes read-only properties only.
    """

    def __init__(  # noqa: PLR0913
        self,
        concept: str,
        amount: Union[Decimal, int, float, str],
        type: Union[str, MovementType],
        date: datetime,
        user_id: UUID,
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        amount_value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if 0 < amount_value <= MAX_AMOUNT:
            amount_value = to_cents(amount_value)
        if not 0 < amount_value <= MAX_AMOUNT:
            raise ValidationError(
                f"Amount must be between {CENT} and {MAX_AMOUNT}",
                details={"amount": str(amount_value)},
            )

        self._id = id or uuid4()
        self._concept = concept
        self._amount = amount_value
        self._type = type if isinstance(type, MovementType) else MovementType(type)
        self._date = to_utc(date)
        self._user_id = user_id
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def concept(self) -> str:
        return self._concept

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def type(self) -> MovementType:
        return self._type

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @classmethod
    def create(
        cls,
        concept: str,
        amount: Union[Decimal, int, float, str],
        type: Union[str, MovementType],
        date: datetime,
        user_id: UUID,
    ) -> "Movement":
        return cls(
            concept=concept.strip(),
            amount=amount,
            type=type,
            date=date,
            user_id=user_id,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movement):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Movement(id={self._id}, type={self._type.value}, "
            f"amount={self._amount}, date={self._date.date().isoformat()})"
        )


@dataclass(frozen=True)
class MovementView:
    """Read model: a movement together with its owner's display name."""

    id: UUID
    concept: str
    amount: Decimal
    type: MovementType
    date: datetime
    user_id: UUID
    user_name: str
