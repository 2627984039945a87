"""Tests for input validation and raw-input parsing."""

import pytest
from datetime import date

from household_ledger.models import MAX_PRICE, RegisterType
from household_ledger.validation import (
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


class TestCodeChecks:
    """Tests for the numeric code validators."""

    @pytest.mark.parametrize("code", [0, 1, RegisterType.INCOME, RegisterType.EXPENSE])
    def test_register_type_valid(self, code):
        """0 and 1 are the only register types."""
        validate_register_type(code)

    @pytest.mark.parametrize("code", [-1, 2, 3, 255, True, "0", None])
    def test_register_type_invalid(self, code):
        """Everything else is rejected."""
        with pytest.raises(InputValidationError) as exc_info:
            validate_register_type(code)
        assert exc_info.value.field == "register_type"
        assert exc_info.value.issue.issue_type == "out_of_range"

    @pytest.mark.parametrize("register_type", [0, 1])
    @pytest.mark.parametrize("category_type", [0, 1, 2])
    def test_category_type_valid(self, register_type, category_type):
        """0-2 is legal under both register types."""
        validate_category_type(register_type, category_type)

    @pytest.mark.parametrize("register_type", [0, 1])
    @pytest.mark.parametrize("category_type", [-1, 3, 10])
    def test_category_type_invalid(self, register_type, category_type):
        """Codes outside 0-2 are rejected under both register types."""
        with pytest.raises(InputValidationError) as exc_info:
            validate_category_type(register_type, category_type)
        assert exc_info.value.field == "category_type"
        assert "between 0 and 2" in str(exc_info.value)

    @pytest.mark.parametrize("register_type", [2, 5, 255, -1])
    @pytest.mark.parametrize("category_type", [0, 1, 2])
    def test_category_type_ignores_register_type(self, register_type, category_type):
        """Only the category code decides; other register codes use the expense range."""
        validate_category_type(register_type, category_type)

    @pytest.mark.parametrize("register_type", [2, 255])
    def test_category_type_out_of_range_with_unknown_register_type(self, register_type):
        """An unknown register type does not widen the category range."""
        with pytest.raises(InputValidationError) as exc_info:
            validate_category_type(register_type, 3)
        assert exc_info.value.field == "category_type"

    @pytest.mark.parametrize("code", [0, 1])
    def test_service_type_alias_valid(self, code):
        """The legacy check follows the register-type rule."""
        validate_service_type(code)

    def test_service_type_alias_invalid(self):
        """The legacy check rejects the same codes."""
        with pytest.raises(InputValidationError):
            validate_service_type(2)

    def test_error_is_value_error(self):
        """Callers can catch validation errors as ValueError."""
        with pytest.raises(ValueError):
            validate_register_type(9)


class TestParsers:
    """Tests for parsing raw user strings."""

    @pytest.mark.parametrize("raw, expected", [("0", 0), (" 1\n", 1)])
    def test_parse_register_type(self, raw, expected):
        """Register type is stripped and parsed."""
        assert parse_register_type(raw) == expected

    @pytest.mark.parametrize("raw, issue_type", [
        ("income", "not_a_number"),
        ("", "not_a_number"),
        ("2", "out_of_range"),
    ])
    def test_parse_register_type_invalid(self, raw, issue_type):
        """Non-numbers and out-of-range codes are distinguished."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_register_type(raw)
        assert exc_info.value.issue.issue_type == issue_type

    def test_parse_category_type(self):
        """Category type is validated against the register type."""
        assert parse_category_type(1, "2") == 2
        with pytest.raises(InputValidationError):
            parse_category_type(0, "3")

    def test_parse_name(self):
        """Names are stripped; blank names are rejected."""
        assert parse_name("  Lunch \n") == "Lunch"
        with pytest.raises(InputValidationError) as exc_info:
            parse_name("   ")
        assert exc_info.value.issue.issue_type == "missing"

    @pytest.mark.parametrize("raw, expected", [("0", 0), ("1200", 1200), (" 300000\n", 300000)])
    def test_parse_price(self, raw, expected):
        """Whole non-negative numbers are accepted."""
        assert parse_price(raw) == expected

    @pytest.mark.parametrize("raw", ["-1", "12.50", "1e3", "", "abc", "+5"])
    def test_parse_price_invalid(self, raw):
        """Signs, decimals and non-numbers are rejected."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_price(raw)
        assert exc_info.value.field == "price"

    def test_parse_price_above_max(self):
        """Prices beyond the stored range are rejected."""
        assert parse_price(str(MAX_PRICE)) == MAX_PRICE
        with pytest.raises(InputValidationError) as exc_info:
            parse_price(str(MAX_PRICE + 1))
        assert exc_info.value.issue.issue_type == "out_of_range"

    def test_parse_date(self):
        """YYYY-MM-DD dates are parsed."""
        assert parse_date("2024-01-25") == date(2024, 1, 25)
        assert parse_date(" 2024-02-29\n") == date(2024, 2, 29)

    @pytest.mark.parametrize("raw, issue_type", [
        ("2024/01/25", "invalid_format"),
        ("25-01-2024", "invalid_format"),
        ("2024-1-5", "invalid_format"),
        ("2024-01-25T10:00", "invalid_format"),
        ("2023-02-29", "invalid_date"),
        ("2024-13-01", "invalid_date"),
    ])
    def test_parse_date_invalid(self, raw, issue_type):
        """Wrong formats and impossible dates are rejected."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_date(raw)
        assert exc_info.value.issue.issue_type == issue_type


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
