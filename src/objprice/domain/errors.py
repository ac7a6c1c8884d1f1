# src/objprice/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the error taxonomy shared by the gateways, the HTTP
views and the calculator controller. Every lookup failure is classified
into one of three families, each mapped to an HTTP status:

- ValidationError: missing or malformed input (400)
- NotFoundError: no quotable price for a symbol or currency pair (404)
- ProviderFailureError: transport or provider failure upstream (500)

The exception message is the user-facing text.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    status_code = 500


class ValidationError(DomainError):
    """Raised when request parameters are missing or malformed."""
    status_code = 400


class NotFoundError(DomainError):
    """Raised when no usable price exists for the requested instrument."""
    status_code = 404


class QuoteNotFoundError(NotFoundError):
    """Raised when the provider has no usable price for a symbol."""
    pass


class RateNotFoundError(NotFoundError):
    """Raised when the provider has no usable price for a currency pair."""
    pass


class InvalidRateError(NotFoundError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""
    pass


class ProviderFailureError(DomainError):
    """Raised when the market-data provider fails (network, schema, crash)."""
    status_code = 500
