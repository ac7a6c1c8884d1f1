# src/objprice/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from objprice.shared.validators import (
    is_valid_positive_number,
    parse_positive_number,
    validate_currency_code,
)
from objprice.shared.logging_conf import setup_logging

__all__ = [
    "is_valid_positive_number",
    "parse_positive_number",
    "validate_currency_code",
    "setup_logging",
]
