# src/objprice/application/quote_service.py
"""
Quote Service - Current Price Lookup

This module contains the QuoteGateway, which asks the market-data provider
for the current price and native currency of a symbol and classifies every
failure into the domain error taxonomy. Raw provider exceptions never reach
the caller. There is no caching: each call performs a fresh lookup.

Files that USE this module:
- objprice.application.rates_service (lookup_quote, usable_price for FX pairs)
- objprice.application.controller (QuoteGateway protocol)
- objprice.adapters.http.views (QuoteGateway behind GET /quote)
- tests.test_quote_service (unit tests)

Files that this module USES:
- objprice.adapters.providers.base (MarketDataProvider interface, ProviderQuote)
- objprice.domain.models (Quote domain model)
- objprice.domain.errors (ValidationError, QuoteNotFoundError, ProviderFailureError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging provider failures
from decimal import Decimal, InvalidOperation  # Exact decimal prices
from typing import Optional  # Type hints for optional values

from objprice.adapters.providers.base import MarketDataProvider, ProviderQuote
from objprice.domain.errors import ProviderFailureError, QuoteNotFoundError, ValidationError
from objprice.domain.models import Quote

log = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"


def lookup_quote(
    provider: MarketDataProvider, symbol: str, failure_message: str
) -> Optional[ProviderQuote]:
    """
    Call the provider, turning any provider exception into ProviderFailureError.

    Args:
        provider: Market-data provider to query
        symbol: Ticker or FX pair symbol
        failure_message: User-facing message of the raised error

    Returns:
        ProviderQuote, or None if the provider has no record

    Raises:
        ProviderFailureError: If the provider raised for any reason
    """
    try:
        return provider.quote(symbol)
    except Exception as e:
        log.error("Provider lookup for %s failed: %s", symbol, e)
        raise ProviderFailureError(failure_message) from e


def usable_price(record: Optional[ProviderQuote]) -> Optional[Decimal]:
    """
    Return the record's price as a finite Decimal, or None if it has none.

    The sign is not checked here; callers decide what a non-positive price means.
    """
    if record is None or record.price is None:
        return None
    try:
        price = Decimal(str(record.price))
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite():
        return None
    return price


class QuoteGateway:
    """
    Fetches the current quote of a symbol from a market-data provider.
    """
    def __init__(self, provider: MarketDataProvider):
        """
        Initialize quote gateway with a provider.

        Args:
            provider: MarketDataProvider instance (typically YahooFinanceProvider)
        """
        self.provider = provider

    def get_quote(self, symbol: str) -> Quote:
        """
        Get the current price and currency of a symbol.

        Args:
            symbol: Ticker symbol; surrounding whitespace is ignored

        Returns:
            Quote with the currency defaulting to USD when the provider omits it

        Raises:
            ValidationError: If the symbol is empty
            QuoteNotFoundError: If the provider has no usable price for the symbol
            ProviderFailureError: If the provider lookup failed
        """
        symbol = (symbol or "").strip()
        if not symbol:
            raise ValidationError("Symbol parameter is required")

        record = lookup_quote(self.provider, symbol, "Failed to fetch quote data")
        price = usable_price(record)
        # A zero price is as unusable as a missing one
        if price is None or price <= 0:
            log.info("No usable price for %s", symbol)
            raise QuoteNotFoundError("Unable to fetch quote for this symbol")

        quote = Quote(
            symbol=record.symbol or symbol,
            price=price,
            currency=record.currency or DEFAULT_CURRENCY,
        )
        log.info("Quote for %s: %s %s", quote.symbol, quote.price, quote.currency)
        return quote
