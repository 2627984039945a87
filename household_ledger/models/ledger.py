"""
Core Data Models for the Household Ledger

These models define the strict schemas for every ledger entry that is
recorded, persisted, and summarized. They are designed to:
1. Keep the category taxonomy closed (no free-text categories)
2. Store prices as magnitudes; the sign only exists at summary time
3. Be serializable to the JSON snapshot file without custom code
4. Be immutable once constructed

DESIGN DECISION: Category is a discriminated union of two small models
(Income / Expense) rather than a flat enum. The discriminator field is what
lands in the JSON file, so a stored record always says which register it
belongs to.
"""

import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# Prices are stored as an unsigned 32-bit amount in the smallest currency unit.
MAX_PRICE = 4_294_967_295


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class RegisterType(int, Enum):
    """
    Top-level register selector.

    The integer values are the codes users type in.
    """
    INCOME = 0
    EXPENSE = 1


class IncomeCategory(str, Enum):
    """Sub-categories for income entries, in menu order."""
    SALARY = "salary"
    BONUS = "bonus"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.title()


class ExpenseCategory(str, Enum):
    """Sub-categories for expense entries, in menu order."""
    FOOD = "food"
    HOBBY = "hobby"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.title()


# =============================================================================
# CATEGORY - Tagged union of Income / Expense
# =============================================================================

class Income(BaseModel):
    """Income category tag."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    register_type: Literal["income"] = "income"
    kind: IncomeCategory

    @property
    def is_income(self) -> bool:
        return True

    @property
    def is_expense(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"Income({self.kind.label})"


class Expense(BaseModel):
    """Expense category tag."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    register_type: Literal["expense"] = "expense"
    kind: ExpenseCategory

    @property
    def is_income(self) -> bool:
        return False

    @property
    def is_expense(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Expense({self.kind.label})"


Category = Annotated[Union[Income, Expense], Field(discriminator="register_type")]


class InvalidCategoryCode(ValueError):
    """
    A register/category code pair reached category_of without validation.

    This is a programming error in the caller, not bad user input:
    raw codes must go through the validator first.
    """

    def __init__(self, register_type: int, category_type: int):
        self.register_type = register_type
        self.category_type = category_type
        super().__init__(
            f"Invalid category code: register_type={register_type!r}, "
            f"category_type={category_type!r}"
        )


# Index in each tuple is the category_type code.
_CATEGORY_TABLE: dict[int, tuple[Income | Expense, ...]] = {
    RegisterType.INCOME: tuple(Income(kind=kind) for kind in IncomeCategory),
    RegisterType.EXPENSE: tuple(Expense(kind=kind) for kind in ExpenseCategory),
}


def _is_code(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def category_choices(register_type: int) -> tuple[Income | Expense, ...]:
    """
    Return the categories selectable under a register type, in code order.

    Raises:
        InvalidCategoryCode: If register_type is not a known register
    """
    try:
        return _CATEGORY_TABLE[register_type]
    except KeyError:
        raise InvalidCategoryCode(register_type, -1) from None


def category_of(register_type: int, category_type: int) -> Income | Expense:
    """
    Build a Category from validated numeric codes.

    register_type 0 (income): 0 -> Salary, 1 -> Bonus, 2 -> Other
    register_type 1 (expense): 0 -> Food, 1 -> Hobby, 2 -> Other

    Raises:
        InvalidCategoryCode: For any other combination. Never falls back
            to a default category.
    """
    if not (_is_code(register_type) and _is_code(category_type)):
        raise InvalidCategoryCode(register_type, category_type)
    choices = _CATEGORY_TABLE.get(register_type)
    if choices is None or category_type not in range(len(choices)):
        raise InvalidCategoryCode(register_type, category_type)
    return choices[category_type]


# =============================================================================
# LEDGER ENTRY
# =============================================================================

class Item(BaseModel):
    """
    One ledger entry.

    Items are append-only: there is no update or delete. A correction is
    recorded as a new entry.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        ...,
        description="Free-text label for the entry"
    )
    category: Category = Field(
        ...,
        description="Income or expense sub-category"
    )
    price: Annotated[
        int,
        Field(
            ge=0,
            le=MAX_PRICE,
            strict=True,
            description="Amount in the smallest currency unit, never negative"
        )
    ]
    date: datetime.date = Field(
        ...,
        strict=True,
        description="Calendar date of the transaction, stored as YYYY-MM-DD"
    )

    @property
    def year(self) -> int:
        return year_of(self)

    @property
    def month(self) -> int:
        return month_of(self)

    @property
    def period_key(self) -> datetime.date:
        return period_key(self)

    @property
    def signed_amount(self) -> int:
        return signed_amount(self)


def year_of(item: Item) -> int:
    """Calendar year of the item's date."""
    return item.date.year


def month_of(item: Item) -> int:
    """Calendar month (1-12) of the item's date."""
    return item.date.month


def period_key(item: Item) -> datetime.date:
    """First day of the item's month, used to group monthly summaries."""
    return item.date.replace(day=1)


def signed_amount(item: Item) -> int:
    """+price for income, -price for expense."""
    if item.category.is_income:
        return item.price
    return -item.price


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in raw user input."""
    model_config = ConfigDict(frozen=True)

    field: str = Field(
        ...,
        description="Input field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'not_a_number', 'out_of_range', 'missing')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning)$",
        description="Issue severity"
    )


# =============================================================================
# SUMMARY MODELS
# =============================================================================

class PeriodSummary(BaseModel):
    """
    Net balance of one period (a month or a year).

    income_total and expense_total are magnitudes; net is the sum of
    signed amounts, so net == income_total - expense_total.
    """
    model_config = ConfigDict(frozen=True)

    period: datetime.date = Field(
        ...,
        description="First day of the period"
    )
    income_total: int = Field(default=0, ge=0)
    expense_total: int = Field(default=0, ge=0)
    net: int = 0
    item_count: int = Field(default=0, ge=0)

    @property
    def month_label(self) -> str:
        return self.period.strftime("%Y-%m")

    @property
    def year_label(self) -> str:
        return str(self.period.year)
