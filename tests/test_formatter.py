# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Amount Formatting

This module contains unit tests for gain/loss and price formatting,
including sign classification, rounding and currency symbols.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- objprice.adapters.formatting.formatter (formatter functions for testing)
- objprice.domain.models (Sign)
- pytest (testing framework)
"""
from decimal import Decimal

from objprice.adapters.formatting.formatter import (
    FormattedAmount,  # Result of format_gain_loss
    currency_symbol,  # Currency code → symbol
    format_gain_loss,  # Signed gain/loss display
    format_price,  # Unsigned price display
)
from objprice.domain.models import Sign


class TestFormatGainLoss:
    def test_positive_usd(self):
        result = format_gain_loss(150.5, "USD")
        assert result.formatted == "+$150.50"
        assert result.sign is Sign.GAIN

    def test_negative_usd(self):
        result = format_gain_loss(-75.25, "USD")
        assert result.formatted == "-$75.25"
        assert result.sign is Sign.LOSS

    def test_positive_eur(self):
        result = format_gain_loss(200.99, "EUR")
        assert result == FormattedAmount(formatted="+€200.99", sign=Sign.GAIN)

    def test_negative_eur(self):
        result = format_gain_loss(-50.5, "EUR")
        assert result.formatted == "-€50.50"
        assert result.sign is Sign.LOSS

    def test_zero_is_gain(self):
        result = format_gain_loss(0, "USD")
        assert result == FormattedAmount(formatted="+$0.00", sign=Sign.GAIN)

    def test_rounds_to_two_decimals(self):
        assert format_gain_loss(123.456789, "USD").formatted == "+$123.46"
        assert format_gain_loss(Decimal("0.125"), "USD").formatted == "+$0.13"
        assert format_gain_loss(Decimal("-1.005"), "USD").formatted == "-$1.01"

    def test_unknown_currency_falls_back_to_dollar(self):
        assert format_gain_loss(10, "GBP").formatted == "+$10.00"

    def test_large_value(self):
        assert format_gain_loss(Decimal("1234567.8"), "USD").formatted == "+$1234567.80"

    def test_magnitude_beyond_default_precision(self):
        result = format_gain_loss(Decimal("1e27"), "USD")
        assert result.formatted == "+$1000000000000000000000000000.00"
        assert result.sign is Sign.GAIN

        assert format_gain_loss(Decimal("-123456789012345678901234567890.125"), "EUR").formatted == (
            "-€123456789012345678901234567890.13"
        )

    def test_rounding_carry_adds_digit(self):
        assert format_gain_loss(Decimal("9999999999999999999999999999.995"), "USD").formatted == (
            "+$10000000000000000000000000000.00"
        )


class TestFormatPrice:
    def test_usd_price(self):
        assert format_price(Decimal("189.2"), "USD") == "$189.20"

    def test_eur_price(self):
        assert format_price(42.125, "EUR") == "€42.13"

    def test_large_price(self):
        assert format_price(Decimal("1e30"), "USD") == "$1" + "0" * 30 + ".00"


class TestCurrencySymbol:
    def test_known_symbols(self):
        assert currency_symbol("USD") == "$"
        assert currency_symbol("EUR") == "€"

    def test_fallback(self):
        assert currency_symbol("JPY") == "$"
        assert currency_symbol("") == "$"
