"""Summary query package."""

from household_ledger.queries.executor import (
    SummaryExecutor,
    net_balance_for_month,
    summarize_by_month,
    summarize_by_year,
)

__all__ = [
    "SummaryExecutor",
    "net_balance_for_month",
    "summarize_by_month",
    "summarize_by_year",
]
