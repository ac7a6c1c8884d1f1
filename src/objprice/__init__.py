# src/objprice/__init__.py
"""
ObjPrice - Objective Price Calculator

Projects the gain or loss of a position between its live quoted price and a
target price, converted into a chosen display currency using a live
exchange rate.
"""

__version__ = "1.0.0"
