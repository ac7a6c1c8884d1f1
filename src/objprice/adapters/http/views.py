# src/objprice/adapters/http/views.py
"""
HTTP Views - Quote and Exchange Rate Endpoints

GET /quote?symbol=<symbol>          → {symbol, price, currency}
GET /exchange-rate?from=<c>&to=<c>  → {from, to, rate}

Errors are returned as {"error": <message>} with the status carried by the
domain error (400 validation, 404 not found, 500 provider failure).

Files that USE this module:
- objprice.adapters.http.urls (URL routing)
- tests.test_views (endpoint tests)

Files that this module USES:
- objprice.application.quote_service (QuoteGateway)
- objprice.application.rates_service (RateGateway)
- objprice.adapters.providers.yahoo (YahooFinanceProvider as default provider)
- objprice.domain.errors (DomainError status mapping)
- objprice.config (settings for the FX pair suffix)
"""
import logging
from decimal import Decimal
from functools import lru_cache
from typing import Union

from rest_framework.decorators import api_view
from rest_framework.response import Response

from objprice.adapters.providers.base import MarketDataProvider
from objprice.adapters.providers.yahoo import YahooFinanceProvider
from objprice.application.quote_service import QuoteGateway
from objprice.application.rates_service import RateGateway
from objprice.config import settings
from objprice.domain.errors import DomainError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_provider() -> MarketDataProvider:
    """Shared market-data provider of the HTTP endpoints."""
    return YahooFinanceProvider()


def _json_number(value: Decimal) -> Union[int, float]:
    # 1 stays 1 in the JSON body, not 1.0
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _error(message: str, status: int) -> Response:
    return Response({"error": message}, status=status)


@api_view(['GET'])
def quote(request):
    """Current price and currency of an asset."""
    symbol = request.query_params.get('symbol')
    if not symbol:
        return _error("Symbol parameter is required", 400)

    try:
        result = QuoteGateway(get_provider()).get_quote(symbol)
    except DomainError as e:
        logger.info("Quote request for %s failed with %d: %s", symbol, e.status_code, e)
        return _error(str(e), e.status_code)
    except Exception:
        logger.exception("Unexpected error fetching quote for %s", symbol)
        return _error("Failed to fetch quote data", 500)

    return Response({
        "symbol": result.symbol,
        "price": _json_number(result.price),
        "currency": result.currency,
    })


@api_view(['GET'])
def exchange_rate(request):
    """Conversion rate between two currency codes."""
    from_currency = request.query_params.get('from')
    to_currency = request.query_params.get('to')
    if not from_currency or not to_currency:
        return _error("Both 'from' and 'to' currency parameters are required", 400)

    try:
        rate = RateGateway(get_provider(), settings.fx_pair_suffix).get_rate(
            from_currency, to_currency
        )
    except DomainError as e:
        logger.info(
            "Rate request %s→%s failed with %d: %s",
            from_currency, to_currency, e.status_code, e,
        )
        return _error(str(e), e.status_code)
    except Exception:
        logger.exception("Unexpected error fetching rate %s→%s", from_currency, to_currency)
        return _error("Failed to fetch exchange rate data", 500)

    return Response({
        "from": rate.from_currency,
        "to": rate.to_currency,
        "rate": _json_number(rate.rate),
    })
