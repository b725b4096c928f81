"""DTOs for the financial report."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class MonthlyData:
    """Income and expense totals of one calendar month."""

    month: str  # "YYYY-MM"
    income: Decimal
    expense: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "income": float(self.income),
            "expense": float(self.expense),
        }


@dataclass(frozen=True)
class Report:
    """Aggregated view over a set of movements."""

    balance: Decimal
    total_income: Decimal
    total_expense: Decimal
    movements_count: int
    monthly_data: list[MonthlyData] = field(default_factory=list)
    balance_percentage: Decimal | None = None
