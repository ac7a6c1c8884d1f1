# src/objprice/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the calculation rules, the quote and rate gateways
and the calculator controller orchestrating them.
"""

from objprice.application.calculator import (
    build_result,
    calculate_gain_loss,
    convert_currency,
)
from objprice.application.quote_service import QuoteGateway
from objprice.application.rates_service import RateGateway, pair_symbol
from objprice.application.controller import CalculatorController, ControllerState

__all__ = [
    "calculate_gain_loss",
    "convert_currency",
    "build_result",
    "QuoteGateway",
    "RateGateway",
    "pair_symbol",
    "CalculatorController",
    "ControllerState",
]
