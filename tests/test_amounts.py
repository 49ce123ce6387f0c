"""Tests for amount parsing at the boundary and the ledger's strict check."""

import math

import pytest

from minibank.amounts import format_number, parse_amount, require_number
from minibank.errors import ValidationError


class TestParseAmount:
    """Tests for parse_amount."""

    def test_parses_numeric_strings(self):
        """Test typed text becomes a float."""
        assert parse_amount("1500") == 1500.0
        assert parse_amount(" 12.5 ") == 12.5
        assert parse_amount("1,50,000") == 150000.0

    def test_passes_numbers_through(self):
        """Test ints and floats are accepted as-is."""
        assert parse_amount(1000) == 1000.0
        assert parse_amount(0.25) == 0.25

    def test_sign_is_not_checked(self):
        """Test negative and zero values are left to the ledger."""
        assert parse_amount("-5") == -5.0
        assert parse_amount("0") == 0.0

    def test_blank_uses_default(self):
        """Test blank input falls back to the default when one is given."""
        assert parse_amount("", default=0) == 0.0
        assert parse_amount("   ", default=0) == 0.0
        assert parse_amount(None, default=10) == 10.0

    def test_blank_without_default_fails(self):
        """Test blank input is an error when there is no default."""
        with pytest.raises(ValidationError, match="Amount is required"):
            parse_amount("")

    @pytest.mark.parametrize("value", ["abc", "12abc", "nan", "inf", "-inf", True, [1], 10 ** 400])
    def test_rejects_non_numbers(self, value):
        """Test non-numeric, NaN, infinite, too-large and bool input."""
        with pytest.raises(ValidationError):
            parse_amount(value)

    def test_field_name_in_message(self):
        """Test the field name shows up in the error."""
        with pytest.raises(ValidationError, match="Initial balance must be a number"):
            parse_amount("x", field="initial balance")


class TestRequireNumber:
    """Tests for require_number."""

    def test_accepts_finite_numbers(self):
        """Test ints and floats pass."""
        assert require_number(3, "bad") == 3.0
        assert require_number(-2.5, "bad") == -2.5

    @pytest.mark.parametrize("value", ["100", None, True, math.nan, math.inf, 10 ** 400])
    def test_rejects_everything_else(self, value):
        """Test strings, None, bool, NaN, infinity and huge ints get the given message."""
        with pytest.raises(ValidationError, match="bad amount"):
            require_number(value, "bad amount")


class TestFormatNumber:
    """Tests for format_number."""

    def test_whole_amounts_have_no_decimals(self):
        assert format_number(1000.0) == "1000"
        assert format_number(0) == "0"

    def test_fractional_amounts(self):
        assert format_number(12.5) == "12.5"

    def test_huge_amounts_use_exponent(self):
        assert format_number(1.5e308) == "1.5e+308"
        assert format_number(1e15) == "1e+15"
