# src/objprice/adapters/providers/base.py
"""
Base Provider Interface for Market Data Providers

This module defines the abstract base class for market-data providers and
the narrow record they return. Providers expose a single lookup; everything
else in the upstream response is dropped at this boundary.

Files that USE this module:
- objprice.adapters.providers.yahoo (YahooFinanceProvider implements MarketDataProvider)
- objprice.application.quote_service (QuoteGateway reads ProviderQuote)
- objprice.application.rates_service (RateGateway reads ProviderQuote)
- tests.* (fake providers)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProviderQuote:
    """
    Fields of a provider quote record the application relies on.

    Any field may be missing upstream; price is None when the record has
    no usable price.
    """
    symbol: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None


class MarketDataProvider(ABC):
    @abstractmethod
    def quote(self, symbol: str) -> Optional[ProviderQuote]:
        """
        Look up the current quote of a symbol (stock ticker or FX pair).

        Returns None when the provider has no record for the symbol.
        Raises RuntimeError on transport or schema failure.
        """
        raise NotImplementedError
