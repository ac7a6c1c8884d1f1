# src/objprice/adapters/http/__init__.py
"""
HTTP Adapters - JSON API

Django REST framework views exposing the quote and exchange-rate lookups.
"""

DJANGO_SETTINGS_MODULE = "objprice.adapters.http.django_settings"

__all__ = ["DJANGO_SETTINGS_MODULE"]
