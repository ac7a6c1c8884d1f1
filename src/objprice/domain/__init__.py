# src/objprice/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from objprice.domain.models import (
    CalculationInput,
    CalculationResult,
    ExchangeRate,
    Quote,
    Sign,
)
from objprice.domain.errors import (
    DomainError,
    InvalidRateError,
    NotFoundError,
    ProviderFailureError,
    QuoteNotFoundError,
    RateNotFoundError,
    ValidationError,
)

__all__ = [
    "Quote",
    "ExchangeRate",
    "CalculationInput",
    "CalculationResult",
    "Sign",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "QuoteNotFoundError",
    "RateNotFoundError",
    "InvalidRateError",
    "ProviderFailureError",
]
