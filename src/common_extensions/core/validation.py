"""Argument validation utilities.

This module provides the guard functions every helper runs before touching
its inputs. Guards raise InvalidArgumentError subclasses and return the
validated value so they can be used inline.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from common_extensions.core.errors import (
    ArgumentNoneError,
    EmptyArgumentError,
    InvalidArgumentError,
)

T = TypeVar("T")


def ensure_not_none(value: T | None, param_name: str) -> T:
    """Ensure a required argument is not None.

    Args:
        value: Argument value to check.
        param_name: Parameter name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        ArgumentNoneError: If value is None.
    """
    if value is None:
        raise ArgumentNoneError(param_name)
    return value


def ensure_str(value: Any, param_name: str) -> str:
    """Ensure an argument is a string (str or a str subclass).

    Raises:
        ArgumentNoneError: If value is None.
        InvalidArgumentError: If value is not a string.
    """
    ensure_not_none(value, param_name)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"expected a string, got {type(value).__name__}", param_name
        )
    return value


def ensure_not_empty(value: Any, param_name: str) -> str:
    """Ensure a string argument is neither None nor empty.

    Raises:
        ArgumentNoneError: If value is None.
        EmptyArgumentError: If value is an empty string.
    """
    ensure_str(value, param_name)
    if not value:
        raise EmptyArgumentError(param_name)
    return value


def ensure_iterable(value: Any, param_name: str) -> Iterable[Any]:
    """Ensure an argument can be iterated.

    Raises:
        ArgumentNoneError: If value is None.
        InvalidArgumentError: If value is not iterable.
    """
    ensure_not_none(value, param_name)
    if not isinstance(value, Iterable):
        raise InvalidArgumentError(
            f"expected an iterable, got {type(value).__name__}", param_name
        )
    return value


def ensure_callable(value: Any, param_name: str) -> Callable[..., Any]:
    """Ensure an argument is callable.

    Raises:
        ArgumentNoneError: If value is None.
        InvalidArgumentError: If value is not callable.
    """
    ensure_not_none(value, param_name)
    if not callable(value):
        raise InvalidArgumentError(
            f"expected a callable, got {type(value).__name__}", param_name
        )
    return value


def ensure_lock(value: Any, param_name: str = "lock") -> Any:
    """Ensure a lock token can be used in a ``with`` statement.

    Any context manager is accepted, so threading.Lock, threading.RLock
    and multiprocessing locks all qualify.

    Raises:
        ArgumentNoneError: If value is None.
        InvalidArgumentError: If value is not a context manager.
    """
    ensure_not_none(value, param_name)
    if not (hasattr(value, "__enter__") and hasattr(value, "__exit__")):
        raise InvalidArgumentError(
            f"lock must be a context manager, got {type(value).__name__}",
            param_name,
        )
    return value
