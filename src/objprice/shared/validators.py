# src/objprice/shared/validators.py
"""
Input Validation Utilities - User Input and Configuration Validation

This module provides validation functions for the calculator. It checks
that quantity and target price text is usable as a positive number and
that currency codes have the expected shape, so that invalid input is
rejected before it reaches the calculation.

Files that USE this module:
- objprice.application.calculator (parse_positive_number when building results)
- objprice.config.settings (validate_currency_code in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Optional


def parse_positive_number(value: Optional[str]) -> Optional[Decimal]:
    """
    Parse user text as a finite, strictly positive number.

    Args:
        value: Text to parse (surrounding whitespace is ignored)

    Returns:
        Parsed Decimal, or None if the text is empty, non-numeric,
        NaN/Infinity, zero or negative, or outside the range of a double
    """
    if not value or not value.strip():
        return None

    # Decimal() accepts digit separators, user input does not
    if "_" in value:
        return None

    try:
        num_val = Decimal(value.strip())
    except (InvalidOperation, ValueError):
        return None

    if not num_val.is_finite() or num_val <= 0:
        return None

    # Same range as a double: overflow to inf or underflow to 0 is invalid
    as_float = float(num_val)
    if math.isinf(as_float) or as_float == 0:
        return None
    return num_val


def is_valid_positive_number(value: Optional[str]) -> bool:
    """
    Validate that a string is a finite number strictly greater than zero.

    Args:
        value: String value to validate

    Returns:
        True if valid, False otherwise
    """
    return parse_positive_number(value) is not None


def validate_currency_code(code: Optional[str]) -> bool:
    """
    Validate ISO-4217-like currency code format.

    Args:
        code: Currency code to validate (e.g. "USD", "EUR")

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False

    # Three ASCII letters, upper case
    return bool(re.match(r'^[A-Z]{3}$', code))
