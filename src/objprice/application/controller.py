# src/objprice/application/controller.py
"""
Calculator Controller - Input Orchestration and Derived Result

This module ties the gateways and the calculator together in response to
user input. It keeps the calculator state in explicit fields and rebuilds
the displayed result after every state change:

    IDLE → LOADING → PRICE_READY | ERROR

A quote fetch clears the previous price and error; on success the asset
currency is adopted from the quote and the exchange rate is refreshed.
Rate failures are logged only and leave the previous rate in effect.

Gateway calls run in a worker thread so the event loop keeps serving input
while a lookup is in flight. When submissions overlap, only the response
to the most recent one is applied.

Files that USE this module:
- tests.test_controller (unit and end-to-end tests)

Files that this module USES:
- objprice.application.calculator (build_result)
- objprice.adapters.formatting.formatter (format_price for the price display)
- objprice.domain.models (Quote, ExchangeRate, CalculationResult)
- objprice.domain.errors (DomainError for gateway failures)
- objprice.config (settings for the default display currency)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import asyncio  # Cooperative scheduling of gateway calls
import logging  # Standard library for logging
from decimal import Decimal  # Exact decimal arithmetic for money
from enum import Enum  # Controller state enumeration
from typing import Optional, Protocol  # Type hints for optional values and gateway protocols

from objprice.adapters.formatting.formatter import format_price
from objprice.application.calculator import build_result
from objprice.application.quote_service import DEFAULT_CURRENCY
from objprice.config import settings
from objprice.domain.errors import DomainError
from objprice.domain.models import CalculationResult, ExchangeRate, Quote

log = logging.getLogger(__name__)

EMPTY_SYMBOL_MESSAGE = "Please enter a valid symbol"


class QuoteSource(Protocol):
    """Protocol for quote gateways (in-process or remote)."""
    def get_quote(self, symbol: str) -> Quote:
        ...


class RateSource(Protocol):
    """Protocol for exchange rate gateways (in-process or remote)."""
    def get_rate(self, from_currency: str, to_currency: str) -> ExchangeRate:
        ...


class ControllerState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    PRICE_READY = "price_ready"
    ERROR = "error"


class CalculatorController:
    """
    State holder for one calculator session.

    Attributes:
        state: Current ControllerState
        quote: Last successful quote, or None
        asset_currency: Native currency of the quoted asset
        display_currency: Currency the result is shown in
        rate: Last known asset→display rate (1 until a rate is fetched)
        quantity: Raw quantity input
        target_price: Raw target price input
        error: User-facing error message, or None
        result: Derived CalculationResult, or None when no result can be shown
    """
    def __init__(
        self,
        quotes: QuoteSource,
        rates: RateSource,
        display_currency: Optional[str] = None,
    ):
        """
        Initialize the controller in IDLE state.

        Args:
            quotes: Gateway used to fetch quotes
            rates: Gateway used to fetch exchange rates
            display_currency: Initial display currency (defaults to settings.default_currency)
        """
        self.quotes = quotes
        self.rates = rates

        self.state = ControllerState.IDLE
        self.quote: Optional[Quote] = None
        self.asset_currency = DEFAULT_CURRENCY
        self.display_currency = display_currency or settings.default_currency
        self.rate = Decimal(1)
        self.quantity = ""
        self.target_price = ""
        self.error: Optional[str] = None
        self.result: Optional[CalculationResult] = None

        # Sequence numbers of the latest submitted lookups
        self._quote_seq = 0
        self._rate_seq = 0

    # -------- derived state --------

    def _recompute(self) -> None:
        self.result = build_result(
            current_price=self.quote.price if self.quote else None,
            quantity_text=self.quantity,
            target_price_text=self.target_price,
            rate=self.rate,
            display_currency=self.display_currency,
        )

    @property
    def is_loading(self) -> bool:
        return self.state is ControllerState.LOADING

    @property
    def price_display(self) -> Optional[str]:
        """Current price formatted in the asset currency, or None without a quote."""
        if self.quote is None:
            return None
        return format_price(self.quote.price, self.asset_currency)

    # -------- user input --------

    def set_quantity(self, text: str) -> None:
        self.quantity = text
        self._recompute()

    def set_target_price(self, text: str) -> None:
        self.target_price = text
        self._recompute()

    async def set_display_currency(self, currency: str) -> None:
        """
        Change the display currency and, when a quote is held, refresh the rate.

        The quote itself is not fetched again.
        """
        self.display_currency = currency
        self._recompute()
        await self._refresh_rate()

    async def fetch_quote(self, symbol: str) -> None:
        """
        Fetch the current price of a symbol.

        Args:
            symbol: User-entered symbol; surrounding whitespace is ignored
        """
        symbol = (symbol or "").strip()
        if not symbol:
            self.error = EMPTY_SYMBOL_MESSAGE
            return

        self._quote_seq += 1
        seq = self._quote_seq

        self.state = ControllerState.LOADING
        self.error = None
        self.quote = None
        self._recompute()

        try:
            quote = await asyncio.to_thread(self.quotes.get_quote, symbol)
        except DomainError as e:
            if seq != self._quote_seq:
                log.debug("Ignoring failure of superseded quote request for %s", symbol)
                return
            log.warning("Quote fetch for %s failed (%s): %s", symbol, type(e).__name__, e)
            self.state = ControllerState.ERROR
            self.error = str(e)
            self.quote = None
            self._recompute()
            return

        if seq != self._quote_seq:
            log.debug("Ignoring superseded quote for %s", symbol)
            return

        self.quote = quote
        self.asset_currency = quote.currency
        self.state = ControllerState.PRICE_READY
        self._recompute()

        await self._refresh_rate()

    # -------- exchange rate --------

    async def _refresh_rate(self) -> None:
        """Fetch the asset→display rate; failures keep the previous rate."""
        if self.quote is None:
            return

        self._rate_seq += 1
        seq = self._rate_seq
        from_currency, to_currency = self.asset_currency, self.display_currency

        try:
            rate = await asyncio.to_thread(self.rates.get_rate, from_currency, to_currency)
        except DomainError as e:
            log.warning(
                "Exchange rate %s→%s unavailable, keeping rate %s: %s",
                from_currency, to_currency, self.rate, e,
            )
            return

        if seq != self._rate_seq:
            log.debug("Ignoring superseded rate %s→%s", from_currency, to_currency)
            return

        self.rate = rate.rate
        self._recompute()
