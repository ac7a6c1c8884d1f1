# src/objprice/adapters/http/django_settings.py
"""
Django Settings - HTTP API Configuration

Minimal Django configuration serving the two read-only JSON endpoints.
There is no database, no session and no authentication; values are taken
from the application Settings.

Files that USE this module:
- objprice.app (DJANGO_SETTINGS_MODULE for the server)
- tests.conftest (Django setup for view tests)

Files that this module USES:
- objprice.config (settings for secret key, debug and allowed hosts)
"""
from objprice.config import settings as app_settings

SECRET_KEY = app_settings.secret_key
DEBUG = app_settings.debug
ALLOWED_HOSTS = app_settings.allowed_hosts

ROOT_URLCONF = "objprice.adapters.http.urls"
WSGI_APPLICATION = None

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

DATABASES = {}

USE_TZ = True
APPEND_SLASH = False

# Logging is configured by objprice.shared.logging_conf
LOGGING_CONFIG = None

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}
