"""Logging configuration for common-extensions.

configure_logging() replaces the root logger's handlers with the ones a
LoggingConfig asks for: a rotating log file, stderr, or both. Every
installed handler carries OperationContextFilter and the configured
formatter.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from common_extensions.logging.context import OperationContextFilter
from common_extensions.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from common_extensions.config.models import LoggingConfig

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.casefold() == "json":
        return JSONFormatter()
    return TextFormatter()


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Open the rotating log file, or return None if it cannot be opened."""
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        # Logging is not configured yet, so report straight to stderr
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> list[logging.Handler]:
    """Install root logger handlers for config.

    The log file is used when configured and openable. Stderr is used
    when include_stderr is set or no file handler could be installed.

    Args:
        config: Validated logging configuration.

    Returns:
        The installed handlers, file handler first.
    """
    level = _LEVEL_MAP[config.level.casefold()]
    formatter = _build_formatter(config.format)
    context_filter = OperationContextFilter()

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)

    return handlers
