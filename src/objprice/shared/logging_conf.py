# src/objprice/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for the application.
It installs one consistent format on stdout and, when requested, on a
rotating log file.

Files that USE this module:
- objprice.app (setup_logging at server startup)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "objprice.log"


def _resolve_log_path(
    log_file: Optional[Union[str, Path]], log_dir: Optional[Union[str, Path]]
) -> Optional[Path]:
    """Return the log file path, creating its directory, or None for no file logging."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_stdout: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> Optional[Path]:
    """
    Configure application-wide logging settings.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; takes precedence over log_file
        log_stdout: Whether to log to stdout (default: True)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)

    Returns:
        Path of the log file in use, or None when logging only to stdout
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    log_file_path = _resolve_log_path(log_file, log_dir)
    if log_file_path is not None:
        handlers.append(
            RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    # Never leave the application silent
    if not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: file=%s, stdout=%s, level=%s",
        log_file_path, log_stdout, logging.getLevelName(level),
    )
    return log_file_path
