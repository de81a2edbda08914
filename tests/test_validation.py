"""Tests for required-parameter validation."""

import pytest

from binance_sdk import ValidationError, check_required_parameter, check_required_parameters


class TestCheckRequiredParameter:
    """Test single-parameter checks."""

    def test_empty_string_fails(self):
        """Test an empty string is rejected with the parameter named."""
        with pytest.raises(ValidationError) as exc_info:
            check_required_parameter("", "email")
        assert exc_info.value.parameter == "email"
        assert str(exc_info.value) == "required parameter email is empty"

    def test_none_fails(self):
        """Test None is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            check_required_parameter(None, "futuresType")
        assert str(exc_info.value) == "required parameter futuresType is nil"

    def test_zero_numbers_pass(self):
        """Test zero is accepted for numeric parameters."""
        check_required_parameter(0, "futuresType")
        check_required_parameter(0.0, "amount")

    def test_present_values_pass(self):
        """Test non-empty values of every kind pass."""
        check_required_parameter("a@b.com", "email")
        check_required_parameter(False, "enableBlvt")
        check_required_parameter(["BTC"], "symbols")

    def test_validation_error_is_value_error(self):
        """Test ValidationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            check_required_parameter("", "coin")


class TestCheckRequiredParameters:
    """Test multi-parameter checks."""

    def test_all_present(self):
        """Test a complete mapping passes."""
        check_required_parameters({"email": "a@b.com", "coin": "BTC", "type": 0})

    def test_first_missing_reported(self):
        """Test the first missing parameter in mapping order is reported."""
        with pytest.raises(ValidationError) as exc_info:
            check_required_parameters({"email": "a@b.com", "coin": "", "asset": ""})
        assert exc_info.value.parameter == "coin"
