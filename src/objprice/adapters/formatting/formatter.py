# src/objprice/adapters/formatting/formatter.py
"""
Result Formatter - Display Strings for Amounts

This module turns signed amounts and prices into display strings. The sign
classification drives presentation (gain vs loss), and magnitudes are always
rendered with exactly two decimals.

Files that USE this module:
- objprice.application.calculator (format_gain_loss when building results)
- tests.test_formatter (unit tests)

Files that this module USES:
- objprice.domain.models (Sign classification)
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

from objprice.domain.models import Sign

Number = Union[Decimal, float, int]

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
}
DEFAULT_SYMBOL = "$"

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class FormattedAmount:
    """Display string of an amount together with its sign classification."""
    formatted: str
    sign: Sign


def _to_decimal(value: Number) -> Decimal:
    # str() keeps the shortest repr of a float, e.g. 123.456789 not 123.4567889999...
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def currency_symbol(currency_code: str) -> str:
    """Return the display symbol for a currency code, "$" when unknown."""
    return CURRENCY_SYMBOLS.get(currency_code, DEFAULT_SYMBOL)


def _fmt_magnitude(value: Decimal) -> str:
    magnitude = value.copy_abs()
    if not magnitude.is_finite():
        return str(magnitude)
    with localcontext() as ctx:
        # quantize needs room for every integer digit, a rounding carry and two decimals
        ctx.prec = max(ctx.prec, magnitude.adjusted() + 4)
        return str(magnitude.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_gain_loss(value: Number, currency_code: str) -> FormattedAmount:
    """
    Format a signed gain/loss amount.

    Zero is classified as a gain and rendered with a leading '+'.

    Args:
        value: Signed amount in currency_code
        currency_code: Display currency code (USD or EUR)

    Returns:
        FormattedAmount, e.g. ("+$150.50", GAIN) or ("-€50.50", LOSS)
    """
    amount = _to_decimal(value)
    sign = Sign.GAIN if amount >= 0 else Sign.LOSS
    prefix = "+" if sign is Sign.GAIN else "-"
    return FormattedAmount(
        formatted=f"{prefix}{currency_symbol(currency_code)}{_fmt_magnitude(amount)}",
        sign=sign,
    )


def format_price(price: Number, currency_code: str) -> str:
    """
    Format a current price without sign, e.g. "$189.25".

    Args:
        price: Price in currency_code
        currency_code: Currency the price is quoted in

    Returns:
        Formatted price string
    """
    return f"{currency_symbol(currency_code)}{_fmt_magnitude(_to_decimal(price))}"
