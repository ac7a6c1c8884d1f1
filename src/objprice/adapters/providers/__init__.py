# src/objprice/adapters/providers/__init__.py
"""
Provider Adapters - External Market Data

This package contains adapters for external market-data sources.
All providers implement the MarketDataProvider interface.
"""

from objprice.adapters.providers.base import MarketDataProvider, ProviderQuote
from objprice.adapters.providers.yahoo import YahooFinanceProvider

__all__ = [
    "MarketDataProvider",
    "ProviderQuote",
    "YahooFinanceProvider",
]
