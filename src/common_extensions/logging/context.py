"""Operation context for log records.

The CLI runs each command inside operation_context(). While it is active,
OperationContextFilter stamps the command name and its target onto every
record, including records from core modules that know nothing about the
CLI. Context is held in contextvars.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_command: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "command", default=None
)
_target: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "target", default=None
)


@contextmanager
def operation_context(
    command: str, target: Path | str | None = None
) -> Generator[None, None, None]:
    """Tag log records emitted inside the block with command and target.

    Nested blocks restore the outer context on exit.

    Example:
        with operation_context("normalize", "notes.txt"):
            logger.info("Rewrote terminators")  # [normalize:notes.txt] ...
    """
    command_token = _command.set(command)
    target_token = _target.set(str(target) if target is not None else None)
    try:
        yield
    finally:
        _target.reset(target_token)
        _command.reset(command_token)


def get_operation_context() -> tuple[str | None, str | None]:
    """Return the active (command, target) pair; either may be None."""
    return _command.get(), _target.get()


class OperationContextFilter(logging.Filter):
    """Copy the active operation context onto each log record.

    Sets ``command`` and ``target`` for the JSON formatter and a compact
    ``context_tag`` such as ``[normalize:a.txt] `` for the text format.
    Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        command, target = get_operation_context()
        record.command = command
        record.target = target

        if command is None:
            record.context_tag = ""
        elif target is None:
            record.context_tag = f"[{command}] "
        else:
            record.context_tag = f"[{command}:{target}] "
        return True
