"""
Data Models Package

This package contains the Pydantic models used by the household ledger.
Every record that is stored or summarized must conform to these schemas.
"""

from household_ledger.models.ledger import (
    MAX_PRICE,
    Category,
    Expense,
    ExpenseCategory,
    Income,
    IncomeCategory,
    InvalidCategoryCode,
    Item,
    PeriodSummary,
    RegisterType,
    ValidationIssue,
    category_choices,
    category_of,
    month_of,
    period_key,
    signed_amount,
    year_of,
)

__all__ = [
    # Taxonomy
    "Category",
    "Expense",
    "ExpenseCategory",
    "Income",
    "IncomeCategory",
    "InvalidCategoryCode",
    "RegisterType",
    "category_choices",
    "category_of",
    # Ledger entry
    "MAX_PRICE",
    "Item",
    "month_of",
    "period_key",
    "signed_amount",
    "year_of",
    # Validation / summary
    "PeriodSummary",
    "ValidationIssue",
]
