# src/objprice/adapters/api_client.py
"""
Calculator API Client - Remote Quote and Rate Gateways

This module implements a client for the /quote and /exchange-rate HTTP
endpoints. It exposes the same get_quote/get_rate interface as the
in-process gateways, so a CalculatorController can run against a remote
server. HTTP statuses are mapped back onto the domain error taxonomy and
the server's error text becomes the exception message.

Files that USE this module:
- tests.test_api_client (unit tests)

Files that this module USES:
- objprice.config (settings for API base URL and timeout)
- objprice.domain.models (Quote, ExchangeRate)
- objprice.domain.errors (error taxonomy)
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Type

import requests

from objprice.config import settings
from objprice.domain.errors import (
    DomainError,
    NotFoundError,
    ProviderFailureError,
    QuoteNotFoundError,
    RateNotFoundError,
    ValidationError,
)
from objprice.domain.models import ExchangeRate, Quote

log = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please try again."


def _error_for_status(
    status_code: int, message: str, not_found_cls: Type[NotFoundError]
) -> DomainError:
    if status_code == 400:
        return ValidationError(message)
    if status_code == 404:
        return not_found_cls(message)
    return ProviderFailureError(message)


def _to_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return number


class CalculatorApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize the API client.

        Args:
            base_url: Optional server URL (defaults to settings.api_base_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds

    def _get(
        self,
        path: str,
        params: Dict[str, str],
        default_message: str,
        not_found_cls: Type[NotFoundError],
    ) -> Dict[str, Any]:
        """
        Perform a GET request and return the JSON body of a successful response.

        Raises:
            ProviderFailureError: On network failure or an unexpected response
            ValidationError / NotFoundError: On 400 / 404 responses
        """
        url = f"{self.base_url}{path}"
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("API timeout after %d seconds: %s", self.timeout, url)
            raise ProviderFailureError(NETWORK_ERROR_MESSAGE) from e
        except requests.exceptions.RequestException as e:
            log.warning("API request failed (network/connection error): %s", e)
            raise ProviderFailureError(NETWORK_ERROR_MESSAGE) from e

        try:
            data = resp.json()
        except ValueError:
            log.error("API returned invalid JSON (status %d): %s", resp.status_code, url)
            data = None

        if 200 <= resp.status_code < 300 and isinstance(data, dict) and "error" not in data:
            return data

        message = default_message
        if isinstance(data, dict) and data.get("error"):
            message = str(data["error"])
        log.warning("API error %d from %s: %s", resp.status_code, url, message)
        if 200 <= resp.status_code < 300:
            raise ProviderFailureError(message)
        raise _error_for_status(resp.status_code, message, not_found_cls)

    def get_quote(self, symbol: str) -> Quote:
        """
        Fetch a quote through GET /quote.

        Args:
            symbol: Ticker symbol

        Returns:
            Quote from the server response
        """
        data = self._get(
            "/quote",
            {"symbol": symbol.strip()},
            "Failed to fetch asset price",
            QuoteNotFoundError,
        )
        try:
            return Quote(
                symbol=str(data.get("symbol") or symbol),
                price=_to_decimal(data.get("price")),
                currency=str(data.get("currency") or "USD"),
            )
        except ValueError as e:
            log.error("API quote response has unexpected schema: %s", data)
            raise ProviderFailureError("Failed to fetch asset price") from e

    def get_rate(self, from_currency: str, to_currency: str) -> ExchangeRate:
        """
        Fetch an exchange rate through GET /exchange-rate.

        Identical currencies return a rate of 1 without a request.

        Returns:
            ExchangeRate from the server response

        Raises:
            InvalidRateError: If the server reports a non-positive rate
        """
        if from_currency == to_currency:
            return ExchangeRate.identity(from_currency)

        data = self._get(
            "/exchange-rate",
            {"from": from_currency, "to": to_currency},
            "Failed to fetch exchange rate data",
            RateNotFoundError,
        )
        try:
            rate = _to_decimal(data.get("rate"))
        except ValueError as e:
            log.error("API rate response has unexpected schema: %s", data)
            raise ProviderFailureError("Failed to fetch exchange rate data") from e
        return ExchangeRate(from_currency=from_currency, to_currency=to_currency, rate=rate)
