"""Logging setup for common-extensions.

Provides configurable text or JSON logging with file rotation, and an
operation context that tags records with the running CLI command.
"""

from common_extensions.logging.config import configure_logging
from common_extensions.logging.context import (
    OperationContextFilter,
    get_operation_context,
    operation_context,
)
from common_extensions.logging.handlers import (
    EXTRA_FIELDS,
    JSONFormatter,
    TextFormatter,
)

__all__ = [
    "EXTRA_FIELDS",
    "JSONFormatter",
    "OperationContextFilter",
    "TextFormatter",
    "configure_logging",
    "get_operation_context",
    "operation_context",
]
