# tests/conftest.py
"""
Shared pytest configuration.

Configures Django once for the view tests; nothing here touches the network.
"""
import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "objprice.adapters.http.django_settings")
django.setup()
