# tests/test_calculator.py
"""
Calculator Tests - Unit Tests for Gain/Loss Rules

This module contains unit tests for the gain/loss projection, currency
conversion and the derivation of the displayed result.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- objprice.application.calculator (calculation functions to test)
- objprice.domain.models (Sign, CalculationInput)
- pytest (testing framework)
"""
from decimal import Decimal

import pytest

from objprice.application.calculator import (
    build_result,  # Derived result from raw state
    calculate_gain_loss,  # (target - current) * quantity
    convert_currency,  # amount * rate
    parse_inputs,  # Validated calculation inputs
)
from objprice.domain.models import CalculationInput, Sign


class TestCalculateGainLoss:
    def test_positive_gain(self):
        assert calculate_gain_loss(100, 150, 10) == 500

    def test_loss(self):
        assert calculate_gain_loss(100, 80, 10) == -200

    @pytest.mark.parametrize("price,quantity", [(100, 10), (0.5, 3), (Decimal("12.34"), Decimal("7"))])
    def test_zero_when_target_equals_current(self, price, quantity):
        assert calculate_gain_loss(price, price, quantity) == 0

    def test_zero_quantity(self):
        assert calculate_gain_loss(100, 150, 0) == 0

    def test_decimal_quantity(self):
        assert calculate_gain_loss(100, 110, 2.5) == 25

    def test_decimal_prices(self):
        assert calculate_gain_loss(99.99, 100.01, 100) == pytest.approx(2, abs=1e-6)
        assert calculate_gain_loss(Decimal("99.99"), Decimal("100.01"), Decimal("100")) == Decimal("2")


class TestConvertCurrency:
    def test_rate_above_one(self):
        assert convert_currency(100, 1.2) == pytest.approx(120)

    def test_rate_below_one(self):
        assert convert_currency(100, 0.85) == pytest.approx(85)

    def test_identity_rate(self):
        assert convert_currency(Decimal("123.45"), Decimal(1)) == Decimal("123.45")
        assert convert_currency(-7, 1) == -7

    def test_negative_amount_keeps_sign(self):
        assert convert_currency(Decimal("-100"), Decimal("1.2")) == Decimal("-120")
        assert convert_currency(-100, 1.2) == pytest.approx(-120)

    def test_decimal_rate(self):
        assert convert_currency(100, 0.9234) == pytest.approx(92.34)


class TestParseInputs:
    def test_valid_inputs(self):
        inputs = parse_inputs(Decimal("100"), "150", "10")
        assert inputs == CalculationInput(
            current_price=Decimal("100"),
            target_price=Decimal("150"),
            quantity=Decimal("10"),
        )

    def test_missing_price(self):
        assert parse_inputs(None, "150", "10") is None

    @pytest.mark.parametrize("target,quantity", [("", "10"), ("150", "0"), ("abc", "10"), ("150", "-1")])
    def test_invalid_text(self, target, quantity):
        assert parse_inputs(Decimal("100"), target, quantity) is None


class TestBuildResult:
    def test_gain_in_asset_currency(self):
        result = build_result(Decimal("100"), "10", "150", Decimal(1), "USD")
        assert result is not None
        assert result.formatted == "+$500.00"
        assert result.sign is Sign.GAIN
        assert result.signed_amount == Decimal("500")
        assert result.display_currency == "USD"

    def test_loss_converted(self):
        result = build_result(Decimal("100"), "10", "80", Decimal("0.5"), "EUR")
        assert result.formatted == "-€100.00"
        assert result.sign is Sign.LOSS

    def test_no_result_without_price(self):
        assert build_result(None, "10", "150", Decimal(1), "USD") is None

    def test_no_result_with_invalid_quantity(self):
        assert build_result(Decimal("100"), "0", "150", Decimal(1), "USD") is None
        assert build_result(Decimal("100"), "", "150", Decimal(1), "USD") is None

    def test_no_result_with_invalid_target(self):
        assert build_result(Decimal("100"), "10", "NaN", Decimal(1), "USD") is None
