# src/objprice/application/rates_service.py
"""
Rates Service - Exchange Rate Lookup

This module contains the RateGateway, which obtains the conversion rate
between two currency codes. Identical codes short-circuit to a rate of 1
without contacting the provider; otherwise the pair is looked up as a
regular quote whose price is the rate.

Files that USE this module:
- objprice.application.controller (RateGateway protocol)
- objprice.adapters.http.views (RateGateway behind GET /exchange-rate)
- tests.test_rates_service (unit tests)

Files that this module USES:
- objprice.application.quote_service (lookup_quote, usable_price)
- objprice.adapters.providers.base (MarketDataProvider interface)
- objprice.domain.models (ExchangeRate domain model)
- objprice.domain.errors (ValidationError, RateNotFoundError, InvalidRateError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging rate lookups

from objprice.adapters.providers.base import MarketDataProvider
from objprice.application.quote_service import lookup_quote, usable_price
from objprice.domain.errors import InvalidRateError, RateNotFoundError, ValidationError
from objprice.domain.models import ExchangeRate

log = logging.getLogger(__name__)

FX_PAIR_SUFFIX = "=X"


def pair_symbol(from_currency: str, to_currency: str, suffix: str = FX_PAIR_SUFFIX) -> str:
    """
    Build the provider symbol of a currency pair.

    Args:
        from_currency: Source currency code (e.g. 'EUR')
        to_currency: Target currency code (e.g. 'USD')
        suffix: Marker identifying the symbol as an FX pair

    Returns:
        Pair symbol, e.g. 'EURUSD=X'
    """
    return f"{from_currency}{to_currency}{suffix}"


class RateGateway:
    """
    Fetches conversion rates between two currencies from a market-data provider.
    """
    def __init__(self, provider: MarketDataProvider, pair_suffix: str = FX_PAIR_SUFFIX):
        """
        Initialize rate gateway with a provider.

        Args:
            provider: MarketDataProvider instance (typically YahooFinanceProvider)
            pair_suffix: Provider convention marking a symbol as an FX pair
        """
        self.provider = provider
        self.pair_suffix = pair_suffix

    def get_rate(self, from_currency: str, to_currency: str) -> ExchangeRate:
        """
        Get the rate converting from_currency amounts into to_currency.

        Args:
            from_currency: Source currency code
            to_currency: Target currency code

        Returns:
            ExchangeRate; rate is exactly 1 when both codes are identical

        Raises:
            ValidationError: If either code is empty
            RateNotFoundError: If the provider has no price for the pair
            InvalidRateError: If the provider price is zero or negative
            ProviderFailureError: If the provider lookup failed
        """
        from_currency = (from_currency or "").strip()
        to_currency = (to_currency or "").strip()
        if not from_currency or not to_currency:
            raise ValidationError("Both 'from' and 'to' currency parameters are required")

        if from_currency == to_currency:
            return ExchangeRate.identity(from_currency)

        symbol = pair_symbol(from_currency, to_currency, self.pair_suffix)
        record = lookup_quote(self.provider, symbol, "Failed to fetch exchange rate data")
        rate = usable_price(record)
        if rate is None:
            log.info("No rate available for %s", symbol)
            raise RateNotFoundError("Unable to fetch exchange rate")
        if rate <= 0:
            log.error("Provider returned non-positive rate for %s: %s", symbol, rate)
            raise InvalidRateError("Unable to fetch exchange rate")

        log.info("Rate %s→%s: %s", from_currency, to_currency, rate)
        return ExchangeRate(from_currency=from_currency, to_currency=to_currency, rate=rate)
