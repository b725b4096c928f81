"""Report query - balance, totals and monthly breakdown of movements.

All sums are accumulated as ``Decimal`` at full precision; rounding to cents
(half away from zero) happens only when the report is assembled.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable, Protocol

from cashbook.application.dtos import MonthlyData, Report
from cashbook.domain.movement import MovementRepository, MovementType
from cashbook.domain.shared.time import to_utc

if TYPE_CHECKING:
    from cashbook.application.factories import RepositoryFactory

CENT = Decimal("0.01")
TENTH = Decimal("0.1")


class ReportableMovement(Protocol):
    """The movement fields the report needs."""

    @property
    def amount(self) -> Decimal: ...

    @property
    def type(self) -> MovementType: ...

    @property
    def date(self) -> datetime: ...


def _to_decimal(value: Decimal | int | float) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_balance(movements: Iterable[ReportableMovement]) -> Decimal:
    """Sum of incomes minus sum of expenses; 0 for no movements."""
    balance = Decimal(0)
    for movement in movements:
        amount = _to_decimal(movement.amount)
        if movement.type == MovementType.INCOME:
            balance += amount
        else:
            balance -= amount
    return balance


def month_key(value: date) -> str:
    """``YYYY-MM`` of a date, taken from the UTC ISO form for datetimes."""
    if isinstance(value, datetime):
        return to_utc(value).isoformat()[:7]
    return value.isoformat()[:7]


def aggregate_by_month(movements: Iterable[ReportableMovement]) -> list[MonthlyData]:
    """Group movements by month, ascending by month key."""
    months: dict[str, dict[MovementType, Decimal]] = {}

    for movement in movements:
        key = month_key(movement.date)
        totals = months.setdefault(
            key,
            {MovementType.INCOME: Decimal(0), MovementType.EXPENSE: Decimal(0)},
        )
        totals[MovementType(movement.type)] += _to_decimal(movement.amount)

    # YYYY-MM is fixed width, so string order is chronological order
    return [
        MonthlyData(
            month=key,
            income=round_money(months[key][MovementType.INCOME]),
            expense=round_money(months[key][MovementType.EXPENSE]),
        )
        for key in sorted(months)
    ]


def balance_percentage(balance: Decimal, total_income: Decimal) -> Decimal | None:
    """Balance as a percentage of income, or None when there is no income."""
    if total_income == 0:
        return None
    return (balance / total_income * 100).quantize(TENTH, rounding=ROUND_HALF_UP)


def compute_report(movements: Iterable[ReportableMovement]) -> Report:
    """Build the full report from a flat list of movements."""
    items = list(movements)

    total_income = Decimal(0)
    total_expense = Decimal(0)
    for movement in items:
        amount = _to_decimal(movement.amount)
        if movement.type == MovementType.INCOME:
            total_income += amount
        else:
            total_expense += amount

    # Exact Decimal arithmetic: equals total_income - total_expense
    balance = round_money(calculate_balance(items))
    total_income = round_money(total_income)

    return Report(
        balance=balance,
        total_income=total_income,
        total_expense=round_money(total_expense),
        movements_count=len(items),
        monthly_data=aggregate_by_month(items),
        balance_percentage=balance_percentage(balance, total_income),
    )


class ReportQuery:
    """Query to build the report over every stored movement."""

    def __init__(self, movement_repository: MovementRepository):
        self._movement_repo = movement_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ReportQuery:
        return cls(movement_repository=factory.movement_repository())

    async def execute(self) -> Report:
        movements = await self._movement_repo.find_all()
        return compute_report(movements)
