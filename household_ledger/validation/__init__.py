"""Input validation package."""

from household_ledger.validation.validator import (
    CATEGORY_CODES,
    InputValidationError,
    parse_category_type,
    parse_date,
    parse_name,
    parse_price,
    parse_register_type,
    validate_category_type,
    validate_register_type,
    validate_service_type,
)

__all__ = [
    "CATEGORY_CODES",
    "InputValidationError",
    "parse_category_type",
    "parse_date",
    "parse_name",
    "parse_price",
    "parse_register_type",
    "validate_category_type",
    "validate_register_type",
    "validate_service_type",
]
