# src/objprice/app.py
"""
Application Entry Point - HTTP Server Startup

This module serves as the composition root of the ObjPrice API server.
It configures logging from the settings, points Django at the API settings
module and serves the quote and exchange-rate endpoints.

Files that USE this module:
- objprice console script (pyproject entry point)
- python -m objprice.app

Files that this module USES:
- objprice.shared.logging_conf (setup_logging for logging configuration)
- objprice.config (settings for server address and logging)
- objprice.adapters.http (Django settings module name)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import os  # Operating system interface for environment variables

from django.core.management import execute_from_command_line  # Django command runner

from objprice.adapters.http import DJANGO_SETTINGS_MODULE  # Django settings of the API
from objprice.config import settings  # Application settings
from objprice.shared.logging_conf import setup_logging  # Configure logging with file rotation


def main() -> None:
    """
    Start the HTTP API server.

    This function:
    1. Sets up logging from the settings
    2. Selects the Django settings module of the API
    3. Runs the server on HTTP_HOST:HTTP_PORT
    """
    setup_logging(
        level=logging.DEBUG if settings.debug else logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", DJANGO_SETTINGS_MODULE)

    logger.info("Working directory: %s", os.getcwd())
    logger.info("Starting API server on %s (debug=%s)", settings.server_address, settings.debug)

    try:
        execute_from_command_line(
            ["objprice", "runserver", settings.server_address, "--noreload"]
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user (KeyboardInterrupt)")
    except Exception as e:
        logger.exception("Unexpected error during server operation: %s (type: %s)", e, type(e).__name__)
        raise


if __name__ == "__main__":
    main()
