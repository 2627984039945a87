"""
Input Validation

DESIGN DECISION: Validation runs on raw external input BEFORE any Category
or Item is constructed. category_of treats bad codes as a programming error
precisely because this module has already gated them.

Two layers live here:

1. CODE CHECKS - validate_register_type / validate_category_type operate on
   integers that have already been parsed.
2. RAW PARSERS - parse_* turn the strings a user typed into typed values,
   running the code checks where relevant.

IMPORTANT: Validation NEVER clamps or defaults. Every problem is raised as
an InputValidationError carrying a ValidationIssue, so the caller can show
the message and ask again.
"""

import datetime
import re

from household_ledger.models.ledger import (
    MAX_PRICE,
    ExpenseCategory,
    IncomeCategory,
    RegisterType,
    ValidationIssue,
)


# Legal category codes per register type. Both taxonomies currently have
# three members; keep the lookup per branch so they can diverge.
CATEGORY_CODES: dict[int, range] = {
    RegisterType.INCOME: range(len(IncomeCategory)),
    RegisterType.EXPENSE: range(len(ExpenseCategory)),
}

REGISTER_CODES = range(len(RegisterType))

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InputValidationError(ValueError):
    """Raw input failed validation."""

    def __init__(self, issue: ValidationIssue):
        self.issue = issue
        super().__init__(issue.message)

    @property
    def field(self) -> str:
        return self.issue.field


def _fail(field: str, issue_type: str, message: str) -> InputValidationError:
    return InputValidationError(
        ValidationIssue(field=field, issue_type=issue_type, message=message)
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# CODE CHECKS
# =============================================================================

def validate_register_type(register_type: int) -> None:
    """
    Check a register type code.

    Legal iff the code is 0 (income) or 1 (expense).

    Raises:
        InputValidationError: For any other value
    """
    if not _is_int(register_type) or register_type not in REGISTER_CODES:
        raise _fail(
            "register_type",
            "out_of_range",
            f"Register type must be 0 (income) or 1 (expense), got {register_type!r}",
        )


def validate_category_type(register_type: int, category_type: int) -> None:
    """
    Check a category type code for the given register type.

    Legal iff category_type is 0, 1 or 2, whatever the register type.
    The allowed range is looked up per register type; any code other than
    income uses the expense range.

    Raises:
        InputValidationError: If category_type is out of range
    """
    allowed = CATEGORY_CODES.get(register_type, CATEGORY_CODES[RegisterType.EXPENSE])
    if not _is_int(category_type) or category_type not in allowed:
        raise _fail(
            "category_type",
            "out_of_range",
            f"Category type must be between {allowed.start} and {allowed.stop - 1}, "
            f"got {category_type!r}",
        )


def validate_service_type(service_type: int) -> None:
    """Legacy name for validate_register_type."""
    validate_register_type(service_type)


# =============================================================================
# RAW PARSERS
# =============================================================================

def _parse_int(field: str, raw: str, label: str) -> int:
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        raise _fail(field, "not_a_number", f"{label} must be a number, got {text!r}") from None


def parse_register_type(raw: str) -> int:
    """Parse and validate a register type typed by the user."""
    register_type = _parse_int("register_type", raw, "Register type")
    validate_register_type(register_type)
    return register_type


def parse_category_type(register_type: int, raw: str) -> int:
    """Parse and validate a category type typed by the user."""
    category_type = _parse_int("category_type", raw, "Category")
    validate_category_type(register_type, category_type)
    return category_type


def parse_name(raw: str) -> str:
    """Strip the item name; an empty name is rejected."""
    name = raw.strip()
    if not name:
        raise _fail("name", "missing", "Item name must not be empty")
    return name


def parse_price(raw: str) -> int:
    """
    Parse a price in the smallest currency unit.

    Only plain non-negative integers up to MAX_PRICE are accepted;
    "12.50", "-1" and "1e3" are all rejected.
    """
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        raise _fail("price", "not_a_number", f"Price must be a whole non-negative number, got {text!r}")
    price = int(text)
    if price > MAX_PRICE:
        raise _fail("price", "out_of_range", f"Price must not exceed {MAX_PRICE}, got {price}")
    return price


def parse_date(raw: str) -> datetime.date:
    """Parse a YYYY-MM-DD date."""
    text = raw.strip()
    if not DATE_PATTERN.match(text):
        raise _fail("date", "invalid_format", f"Date must be in YYYY-MM-DD format, got {text!r}")
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        raise _fail("date", "invalid_date", f"{text} is not a valid calendar date") from None
