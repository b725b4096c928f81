"""Report schemas. Keys are camelCase on the wire."""

from pydantic import BaseModel, ConfigDict, Field

from cashbook.application.dtos import MonthlyData, Report


class MonthlyDataResponse(BaseModel):
    month: str
    income: float
    expense: float

    @classmethod
    def from_dto(cls, data: MonthlyData) -> "MonthlyDataResponse":
        return cls(**data.to_dict())


class ReportResponse(BaseModel):
    """Balance, totals and per-month breakdown of all movements."""

    balance: float
    total_income: float = Field(..., alias="totalIncome")
    total_expense: float = Field(..., alias="totalExpense")
    movements_count: int = Field(..., alias="movementsCount")
    monthly_data: list[MonthlyDataResponse] = Field(..., alias="monthlyData")
    balance_percentage: float | None = Field(None, alias="balancePercentage")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "balance": 450.0,
                "totalIncome": 1500.0,
                "totalExpense": 1050.0,
                "movementsCount": 12,
                "monthlyData": [
                    {"month": "2024-01", "income": 1000.0, "expense": 700.0},
                    {"month": "2024-02", "income": 500.0, "expense": 350.0},
                ],
                "balancePercentage": 30.0,
            },
        },
    )

    @classmethod
    def from_report(cls, report: Report) -> "ReportResponse":
        return cls(
            balance=float(report.balance),
            total_income=float(report.total_income),
            total_expense=float(report.total_expense),
            movements_count=report.movements_count,
            monthly_data=[MonthlyDataResponse.from_dto(m) for m in report.monthly_data],
            balance_percentage=(
                float(report.balance_percentage)
                if report.balance_percentage is not None
                else None
            ),
        )
