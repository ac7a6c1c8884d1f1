# tests/test_api_client.py
"""
API Client Tests - Unit Tests for the Remote Gateways

This module contains unit tests for CalculatorApiClient. requests is
mocked; the tests check response parsing and the mapping of HTTP
statuses and network failures onto domain errors.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- objprice.adapters.api_client (CalculatorApiClient for testing)
- objprice.domain (models and errors)
- unittest.mock (Mock for HTTP mocking)
- pytest (testing framework)
"""
from decimal import Decimal

import pytest
import requests

from unittest.mock import Mock, patch

from objprice.adapters.api_client import NETWORK_ERROR_MESSAGE, CalculatorApiClient
from objprice.domain.errors import (
    InvalidRateError,
    ProviderFailureError,
    QuoteNotFoundError,
    RateNotFoundError,
    ValidationError,
)
from objprice.domain.models import ExchangeRate, Quote


def _response(status_code, payload):
    resp = Mock()
    resp.status_code = status_code
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


class TestCalculatorApiClient:
    def test_init_with_custom_params(self):
        client = CalculatorApiClient(base_url="http://test.com/", timeout=5)
        assert client.base_url == "http://test.com"
        assert client.timeout == 5

    def test_init_with_defaults(self):
        client = CalculatorApiClient()
        assert client.base_url == "http://127.0.0.1:8000"
        assert client.timeout == 10

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_quote_success(self, mock_get):
        mock_get.return_value = _response(200, {"symbol": "AAPL", "price": 189.25, "currency": "USD"})

        quote = CalculatorApiClient(base_url="http://test.com").get_quote(" AAPL ")

        assert quote == Quote(symbol="AAPL", price=Decimal("189.25"), currency="USD")
        mock_get.assert_called_once_with(
            "http://test.com/quote", params={"symbol": "AAPL"}, timeout=10
        )

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_quote_not_found(self, mock_get):
        mock_get.return_value = _response(404, {"error": "Unable to fetch quote for this symbol"})

        with pytest.raises(QuoteNotFoundError, match="Unable to fetch quote for this symbol"):
            CalculatorApiClient().get_quote("NOPE")

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_quote_bad_request(self, mock_get):
        mock_get.return_value = _response(400, {"error": "Symbol parameter is required"})

        with pytest.raises(ValidationError):
            CalculatorApiClient().get_quote("")

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_quote_server_error_without_json(self, mock_get):
        mock_get.return_value = _response(502, ValueError("no json"))

        with pytest.raises(ProviderFailureError, match="Failed to fetch asset price"):
            CalculatorApiClient().get_quote("AAPL")

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_quote_malformed_body(self, mock_get):
        mock_get.return_value = _response(200, {"symbol": "AAPL", "price": "n/a"})

        with pytest.raises(ProviderFailureError):
            CalculatorApiClient().get_quote("AAPL")

    @patch('objprice.adapters.api_client.requests.get')
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ProviderFailureError, match=NETWORK_ERROR_MESSAGE):
            CalculatorApiClient().get_quote("AAPL")

    @patch('objprice.adapters.api_client.requests.get')
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(ProviderFailureError, match=NETWORK_ERROR_MESSAGE):
            CalculatorApiClient().get_rate("USD", "EUR")

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_rate_success(self, mock_get):
        mock_get.return_value = _response(200, {"from": "USD", "to": "EUR", "rate": 0.9234})

        rate = CalculatorApiClient(base_url="http://test.com").get_rate("USD", "EUR")

        assert rate == ExchangeRate("USD", "EUR", Decimal("0.9234"))
        mock_get.assert_called_once_with(
            "http://test.com/exchange-rate", params={"from": "USD", "to": "EUR"}, timeout=10
        )

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_rate_same_currency_skips_request(self, mock_get):
        rate = CalculatorApiClient().get_rate("EUR", "EUR")

        assert rate.rate == 1
        mock_get.assert_not_called()

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_rate_not_found(self, mock_get):
        mock_get.return_value = _response(404, {"error": "Unable to fetch exchange rate"})

        with pytest.raises(RateNotFoundError):
            CalculatorApiClient().get_rate("USD", "EUR")

    @patch('objprice.adapters.api_client.requests.get')
    def test_get_rate_non_positive(self, mock_get):
        mock_get.return_value = _response(200, {"from": "USD", "to": "EUR", "rate": 0})

        with pytest.raises(InvalidRateError):
            CalculatorApiClient().get_rate("USD", "EUR")
