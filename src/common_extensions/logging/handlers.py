"""Log formatters for common-extensions.

Core modules and CLI commands attach structured fields to their records
through ``extra=`` using the names in EXTRA_FIELDS. JSONFormatter lifts
those fields, and the operation context, to the top level of each entry.
TextFormatter prints the context as a tag and the fields as key=value
pairs after the message.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Set by OperationContextFilter
CONTEXT_FIELDS: tuple[str, ...] = ("command", "target")

# Passed by callers through extra=
EXTRA_FIELDS: tuple[str, ...] = ("style", "policy", "key", "count", "owner", "method")

TEXT_FORMAT = "%(asctime)s - %(context_tag)s%(name)s - %(levelname)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

# Attributes every LogRecord carries, plus the ones formatters add
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "context_tag"}

_KNOWN_FIELDS = frozenset(CONTEXT_FIELDS + EXTRA_FIELDS)


def _present(record: logging.LogRecord, names: tuple[str, ...]) -> dict[str, Any]:
    return {
        name: getattr(record, name)
        for name in names
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Keys: timestamp (ISO-8601 UTC), level, logger, message, then any
    context and EXTRA_FIELDS that are set. Other ``extra`` attributes go
    under "extra". A formatted traceback goes under "exception".
    """

    def format(self, record: logging.LogRecord) -> str:
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": record_time.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_present(record, CONTEXT_FIELDS + EXTRA_FIELDS))

        unknown = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in _KNOWN_FIELDS
            and not key.startswith("_")
        }
        if unknown:
            entry["extra"] = unknown

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable single-line format.

    Example line:
        2026-01-05T10:00:00+0000 - [normalize:a.txt] common_extensions.core.
        line_endings - WARNING - Treating MIXED as UNIX [style=mixed]
    """

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt=TEXT_DATEFMT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        # Records that bypassed OperationContextFilter have no tag
        record.__dict__.setdefault("context_tag", "")
        line = super().formatMessage(record)

        fields = _present(record, EXTRA_FIELDS)
        if not fields:
            return line
        pairs = " ".join(f"{name}={value}" for name, value in fields.items())
        return f"{line} [{pairs}]"
