# src/objprice/adapters/providers/yahoo.py
"""
Yahoo Finance Provider for Quotes and FX Rates

This module implements the market-data provider on top of yfinance. Stock
tickers ("AAPL") and currency pairs ("EURUSD=X") are looked up the same
way; the quote record is narrowed to symbol, price and currency.

Files that USE this module:
- objprice.adapters.http.views (default provider of the HTTP endpoints)
- tests.test_providers (unit tests)

Files that this module USES:
- objprice.adapters.providers.base (MarketDataProvider interface, ProviderQuote)
"""
import logging
import math
from typing import Any, Mapping, Optional

import yfinance as yf

from objprice.adapters.providers.base import MarketDataProvider, ProviderQuote

log = logging.getLogger(__name__)

# Yahoo fills regularMarketPrice for most instruments, currentPrice for some equities
PRICE_FIELDS = ("regularMarketPrice", "currentPrice")


class YahooFinanceProvider(MarketDataProvider):

    @staticmethod
    def _extract_price(info: Mapping[str, Any]) -> Optional[float]:
        """
        Return the first numeric price field of a quote record.

        Raises:
            RuntimeError: If a price field holds a non-numeric value
        """
        for field in PRICE_FIELDS:
            value = info.get(field)
            if value is None:
                continue
            if isinstance(value, bool):
                raise RuntimeError(f"Yahoo Finance returned non-numeric {field}: {value!r}")
            try:
                price = float(value)
            except (TypeError, ValueError) as e:
                raise RuntimeError(f"Yahoo Finance returned non-numeric {field}: {value!r}") from e
            if math.isnan(price):
                continue
            return price
        return None

    def quote(self, symbol: str) -> Optional[ProviderQuote]:
        """
        Get the current quote for a symbol from Yahoo Finance.

        Args:
            symbol: Ticker or FX pair symbol

        Returns:
            ProviderQuote, or None if Yahoo has no record for the symbol

        Raises:
            RuntimeError: If the lookup fails or returns an unexpected structure
        """
        try:
            log.info("Fetching quote for %s from Yahoo Finance", symbol)
            info = yf.Ticker(symbol).info
        except Exception as e:
            log.warning("Yahoo Finance lookup failed for %s: %s", symbol, e)
            raise RuntimeError(f"Yahoo Finance request failed: {e}") from e

        if not info:
            log.info("Yahoo Finance returned no record for %s", symbol)
            return None
        if not isinstance(info, Mapping):
            log.error("Yahoo Finance returned non-dict record for %s: %r", symbol, info)
            raise RuntimeError("Yahoo Finance returned non-dict quote record")

        return ProviderQuote(
            symbol=info.get("symbol"),
            price=self._extract_price(info),
            currency=info.get("currency"),
        )
