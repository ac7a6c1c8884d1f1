# src/objprice/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Quotes (current price and native currency of an asset)
- Exchange rates between two currency codes
- Calculation inputs and derived results

Files that USE this module:
- objprice.application.* (gateways, calculator and controller)
- objprice.adapters.* (HTTP views and API client build and read domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- objprice.domain.errors (InvalidRateError for rate validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for money
from enum import Enum  # Enumerations for sign classification

from objprice.domain.errors import InvalidRateError


class Sign(str, Enum):
    """Classification of a signed amount. Zero counts as a gain."""
    GAIN = "gain"
    LOSS = "loss"


@dataclass(frozen=True)
class Quote:
    """
    Current market price of an asset.

    Attributes:
        symbol: Ticker identifier (e.g. "AAPL")
        price: Current price in the asset's native currency
        currency: ISO-4217-like code of the native currency
    """
    symbol: str
    price: Decimal
    currency: str = "USD"


@dataclass(frozen=True)
class ExchangeRate:
    """
    Multiplicative factor converting an amount from one currency to another.

    Attributes:
        from_currency: Source currency code
        to_currency: Target currency code
        rate: Units of to_currency per 1 unit of from_currency, always > 0
    """
    from_currency: str
    to_currency: str
    rate: Decimal

    def __post_init__(self) -> None:
        if not self.rate > 0:
            raise InvalidRateError(
                f"Non-positive rate {self.rate} for {self.from_currency}/{self.to_currency}"
            )

    @classmethod
    def identity(cls, currency: str) -> "ExchangeRate":
        return cls(from_currency=currency, to_currency=currency, rate=Decimal(1))


@dataclass(frozen=True)
class CalculationInput:
    """Validated numeric inputs of a gain/loss projection."""
    current_price: Decimal
    target_price: Decimal
    quantity: Decimal


@dataclass(frozen=True)
class CalculationResult:
    """
    Gain/loss projection ready for display.

    Attributes:
        signed_amount: Gain (positive) or loss (negative) in display_currency
        display_currency: Currency the amount is expressed in
        formatted: Display string, e.g. "+$150.50"
        sign: GAIN or LOSS
    """
    signed_amount: Decimal
    display_currency: str
    formatted: str
    sign: Sign
