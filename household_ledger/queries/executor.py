"""
Summary Execution Engine

DESIGN DECISION: Summaries are DERIVED, never stored.
Every number reported here is recomputed from the item list, using one
arithmetic rule: the sum of signed_amount over the items of a period.

The executor reads with load_or_fail. A summary over a missing or empty
ledger is an error the caller should see, not a silent zero.
"""

import datetime
from collections.abc import Callable, Iterable

from household_ledger.models.ledger import Item, PeriodSummary
from household_ledger.services.storage import LedgerStorageInterface


def _year_key(item: Item) -> datetime.date:
    return datetime.date(item.year, 1, 1)


def _summarize(
    items: Iterable[Item],
    key: Callable[[Item], datetime.date],
) -> list[PeriodSummary]:
    """Group items by key and total each group, sorted by period."""
    groups: dict[datetime.date, list[Item]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)

    summaries = []
    for period in sorted(groups):
        members = groups[period]
        income = sum(item.price for item in members if item.category.is_income)
        expense = sum(item.price for item in members if item.category.is_expense)
        summaries.append(PeriodSummary(
            period=period,
            income_total=income,
            expense_total=expense,
            net=sum(item.signed_amount for item in members),
            item_count=len(members),
        ))
    return summaries


def summarize_by_month(items: Iterable[Item]) -> list[PeriodSummary]:
    """One summary per (year, month) present in items, oldest first."""
    return _summarize(items, key=lambda item: item.period_key)


def summarize_by_year(items: Iterable[Item]) -> list[PeriodSummary]:
    """One summary per year present in items, oldest first."""
    return _summarize(items, key=_year_key)


def net_balance_for_month(items: Iterable[Item], year: int, month: int) -> int:
    """Net balance of one month; 0 if no item falls in it."""
    key = datetime.date(year, month, 1)
    return sum(item.signed_amount for item in items if item.period_key == key)


class SummaryExecutor:
    """
    Computes period summaries from stored ledger data.

    GUARANTEES:
    - Only reports what is in storage
    - Raises if there is nothing to summarize
    """

    def __init__(self, storage: LedgerStorageInterface):
        self._storage = storage

    def monthly(self) -> list[PeriodSummary]:
        return summarize_by_month(self._storage.load_or_fail())

    def yearly(self) -> list[PeriodSummary]:
        return summarize_by_year(self._storage.load_or_fail())

    def for_month(self, year: int, month: int) -> int:
        return net_balance_for_month(self._storage.load_or_fail(), year, month)
