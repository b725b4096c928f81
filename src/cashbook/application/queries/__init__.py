"""Query layer. Read-only operations for retrieving data."""

from cashbook.application.queries.list_movements_query import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListMovementsQuery,
)
from cashbook.application.queries.list_users_query import ListUsersQuery
from cashbook.application.queries.report_query import (
    ReportQuery,
    aggregate_by_month,
    balance_percentage,
    calculate_balance,
    compute_report,
    month_key,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "ListMovementsQuery",
    "ListUsersQuery",
    "ReportQuery",
    "aggregate_by_month",
    "balance_percentage",
    "calculate_balance",
    "compute_report",
    "month_key",
]
