"""Shared fixtures for household ledger tests."""

from datetime import date

import pytest

from household_ledger.config import get_settings
from household_ledger.models import (
    Expense,
    ExpenseCategory,
    Income,
    IncomeCategory,
    Item,
)
from household_ledger.services.storage import JsonFileLedgerStorage


@pytest.fixture
def paycheck() -> Item:
    return Item(
        name="Paycheck",
        category=Income(kind=IncomeCategory.SALARY),
        price=300000,
        date=date(2024, 1, 25),
    )


@pytest.fixture
def lunch() -> Item:
    return Item(
        name="Lunch",
        category=Expense(kind=ExpenseCategory.FOOD),
        price=1200,
        date=date(2024, 1, 26),
    )


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "ledger" / "data.json"


@pytest.fixture
def json_storage(ledger_path) -> JsonFileLedgerStorage:
    return JsonFileLedgerStorage(ledger_path)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
