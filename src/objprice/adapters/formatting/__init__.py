# src/objprice/adapters/formatting/__init__.py
"""
Formatting Adapters - Amount Formatting

This package contains display formatting for gain/loss amounts and prices.
"""

from objprice.adapters.formatting.formatter import (
    FormattedAmount,
    currency_symbol,
    format_gain_loss,
    format_price,
)

__all__ = [
    "FormattedAmount",
    "currency_symbol",
    "format_gain_loss",
    "format_price",
]
