"""Tests for period summary derivation."""

import pytest
from datetime import date

from household_ledger.models import Item, PeriodSummary, category_of
from household_ledger.queries import (
    SummaryExecutor,
    net_balance_for_month,
    summarize_by_month,
    summarize_by_year,
)
from household_ledger.services.storage import (
    EmptyDataset,
    FileUnreadable,
    InMemoryLedgerStorage,
)


def _item(register_type: int, category_type: int, price: int, day: date) -> Item:
    return Item(
        name="entry",
        category=category_of(register_type, category_type),
        price=price,
        date=day,
    )


@pytest.fixture
def mixed_items() -> list[Item]:
    return [
        _item(0, 0, 300000, date(2024, 1, 25)),
        _item(1, 0, 1200, date(2024, 1, 26)),
        _item(1, 1, 5000, date(2024, 2, 3)),
        _item(0, 1, 100000, date(2023, 12, 10)),
        _item(1, 2, 800, date(2024, 1, 1)),
    ]


class TestMonthlySummaries:
    """Tests for grouping by month."""

    def test_groups_sorted_by_period(self, mixed_items):
        """One summary per month, oldest first."""
        summaries = summarize_by_month(mixed_items)
        assert [s.period for s in summaries] == [
            date(2023, 12, 1),
            date(2024, 1, 1),
            date(2024, 2, 1),
        ]

    def test_month_totals(self, mixed_items):
        """Income, expense and net are computed per month."""
        january = summarize_by_month(mixed_items)[1]
        assert january == PeriodSummary(
            period=date(2024, 1, 1),
            income_total=300000,
            expense_total=2000,
            net=298000,
            item_count=3,
        )
        assert january.month_label == "2024-01"

    def test_expense_only_month_is_negative(self, mixed_items):
        """A month with only expenses has a negative net."""
        february = summarize_by_month(mixed_items)[2]
        assert february.net == -5000
        assert february.income_total == 0

    def test_empty_input(self):
        """No items, no summaries."""
        assert summarize_by_month([]) == []

    def test_net_balance_for_month(self, mixed_items):
        """Net balance sums signed amounts of matching items only."""
        assert net_balance_for_month(mixed_items, 2024, 1) == 298000
        assert net_balance_for_month(mixed_items, 2023, 12) == 100000
        assert net_balance_for_month(mixed_items, 2024, 3) == 0

    def test_same_month_different_year_not_merged(self):
        """Months are keyed by year as well."""
        items = [
            _item(0, 0, 10, date(2023, 1, 15)),
            _item(0, 0, 20, date(2024, 1, 15)),
        ]
        assert [s.net for s in summarize_by_month(items)] == [10, 20]


class TestYearlySummaries:
    """Tests for grouping by year."""

    def test_year_totals(self, mixed_items):
        """Yearly summaries cover every month of the year."""
        summaries = summarize_by_year(mixed_items)
        assert [s.year_label for s in summaries] == ["2023", "2024"]
        assert summaries[0].net == 100000
        assert summaries[1].net == 300000 - 1200 - 5000 - 800
        assert summaries[1].item_count == 4

    def test_net_equals_income_minus_expense(self, mixed_items):
        """net == income_total - expense_total for every period."""
        for summary in summarize_by_month(mixed_items) + summarize_by_year(mixed_items):
            assert summary.net == summary.income_total - summary.expense_total


class TestSummaryExecutor:
    """Tests for summaries over storage."""

    def test_reads_from_storage(self, mixed_items):
        """The executor summarizes what storage holds."""
        executor = SummaryExecutor(InMemoryLedgerStorage(mixed_items))
        assert len(executor.monthly()) == 3
        assert len(executor.yearly()) == 2
        assert executor.for_month(2024, 1) == 298000

    def test_missing_ledger_raises(self):
        """Summarizing a never-saved ledger is an error."""
        with pytest.raises(FileUnreadable):
            SummaryExecutor(InMemoryLedgerStorage()).monthly()

    def test_empty_ledger_raises(self):
        """Summarizing an empty ledger is an error."""
        with pytest.raises(EmptyDataset):
            SummaryExecutor(InMemoryLedgerStorage([])).for_month(2024, 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
