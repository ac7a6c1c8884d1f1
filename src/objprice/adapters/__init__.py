# src/objprice/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (market data)
- HTTP (API endpoints and client)
- Formatting (output)
"""

__all__ = []
