# src/objprice/application/calculator.py
"""
Calculator - Gain/Loss Projection and Currency Conversion

This module contains the pure calculation rules of the application:
projecting the gain or loss between the current and a target price,
converting it with an exchange rate, and assembling the displayed result
from the controller's raw state.

Files that USE this module:
- objprice.application.controller (build_result after every state change)
- tests.test_calculator (unit tests)

Files that this module USES:
- objprice.shared.validators (parse_positive_number for user text)
- objprice.adapters.formatting.formatter (format_gain_loss for display)
- objprice.domain.models (CalculationInput, CalculationResult)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from decimal import Decimal  # Exact decimal arithmetic for money
from typing import Optional, TypeVar  # Type hints for optional values and numeric types

from objprice.adapters.formatting.formatter import format_gain_loss  # Display string and sign
from objprice.domain.models import CalculationInput, CalculationResult  # Domain models
from objprice.shared.validators import parse_positive_number  # Validate quantity/target text

N = TypeVar("N", Decimal, float, int)


def calculate_gain_loss(current_price: N, target_price: N, quantity: N) -> N:
    """
    Project the gain or loss of a position.

    Formula: (target_price - current_price) * quantity

    Args:
        current_price: Current price of the asset
        target_price: Target price set by the user
        quantity: Quantity of the asset held

    Returns:
        Positive value for a gain, negative for a loss, zero when the
        target equals the current price or the quantity is zero
    """
    return (target_price - current_price) * quantity


def convert_currency(amount: N, rate: N) -> N:
    """
    Convert an amount with an exchange rate.

    Args:
        amount: Amount in the source currency (sign is preserved)
        rate: Rate from source to target currency, as produced by RateGateway

    Returns:
        Amount in the target currency
    """
    return amount * rate


def parse_inputs(
    current_price: Optional[Decimal],
    target_price_text: Optional[str],
    quantity_text: Optional[str],
) -> Optional[CalculationInput]:
    """Return validated inputs, or None if any of them is missing or invalid."""
    if current_price is None:
        return None
    target_price = parse_positive_number(target_price_text)
    quantity = parse_positive_number(quantity_text)
    if target_price is None or quantity is None:
        return None
    return CalculationInput(
        current_price=current_price,
        target_price=target_price,
        quantity=quantity,
    )


def build_result(
    current_price: Optional[Decimal],
    quantity_text: Optional[str],
    target_price_text: Optional[str],
    rate: Decimal,
    display_currency: str,
) -> Optional[CalculationResult]:
    """
    Derive the displayed gain/loss from the current calculator state.

    A result exists only when a current price is known and both the
    quantity and the target price are valid positive numbers.

    Args:
        current_price: Price from the last successful quote, or None
        quantity_text: Raw quantity input
        target_price_text: Raw target price input
        rate: Asset currency to display currency rate
        display_currency: Currency the result is shown in

    Returns:
        CalculationResult, or None when no result can be shown
    """
    inputs = parse_inputs(current_price, target_price_text, quantity_text)
    if inputs is None:
        return None

    in_asset_currency = calculate_gain_loss(
        inputs.current_price, inputs.target_price, inputs.quantity
    )
    in_display_currency = convert_currency(in_asset_currency, rate)
    shown = format_gain_loss(in_display_currency, display_currency)
    return CalculationResult(
        signed_amount=in_display_currency,
        display_currency=display_currency,
        formatted=shown.formatted,
        sign=shown.sign,
    )
