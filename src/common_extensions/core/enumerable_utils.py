"""Enumerable helpers.

This module provides helpers over arbitrary iterables: a None predicate,
index pairing, lock-guarded materialization and iteration, and rendering
items to strings with a configurable policy for None items.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Any, TextIO, TypeVar

from common_extensions.core.errors import InvalidArgumentError, InvalidOperationError
from common_extensions.core.validation import (
    ensure_callable,
    ensure_iterable,
    ensure_lock,
    ensure_str,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NullItemPolicy(str, Enum):
    """How None items are handled when rendering items to strings."""

    REMOVE = "remove"
    """Drop None items from the output."""

    INCLUDE = "include"
    """Keep None items (rendered as None, or as "" when joined)."""

    RAISE = "raise"
    """Raise InvalidOperationError if any item is None."""


def _coerce_policy(policy: NullItemPolicy | str) -> NullItemPolicy:
    try:
        return NullItemPolicy(policy)
    except ValueError as e:
        raise InvalidArgumentError(
            f"unknown null item policy: {policy!r}", "policy"
        ) from e


def any_none(items: Iterable[Any]) -> bool:
    """Check whether any item is None.

    Args:
        items: Items to check. Consumed at most once.

    Returns:
        True if at least one item is None. False for an empty iterable.

    Raises:
        ArgumentNoneError: If items is None.
    """
    ensure_iterable(items, "items")
    return any(item is None for item in items)


def with_index(items: Iterable[T]) -> Iterator[tuple[T, int]]:
    """Pair each item with its zero-based position.

    Unlike enumerate(), pairs are (item, index).

    Raises:
        ArgumentNoneError: If items is None.
    """
    ensure_iterable(items, "items")
    return ((item, index) for index, item in enumerate(items))


def to_collection(items: Iterable[T], lock: Any = None) -> list[T]:
    """Materialize items into a new list.

    Args:
        items: Items to copy.
        lock: Optional lock token held while the items are read.

    Returns:
        New list with the items in iteration order.

    Raises:
        ArgumentNoneError: If items is None.
        InvalidArgumentError: If lock is not a context manager.
    """
    ensure_iterable(items, "items")
    if lock is None:
        return list(items)

    ensure_lock(lock)
    with lock:
        return list(items)


def for_each(items: Iterable[T], action: Callable[[T], Any], lock: Any = None) -> None:
    """Call action on every item, in order.

    Args:
        items: Items to visit.
        action: Callable invoked with each item. Return values are ignored.
        lock: Optional lock token held for the whole iteration.

    Raises:
        ArgumentNoneError: If items or action is None.
        InvalidArgumentError: If lock is not a context manager.
    """
    ensure_iterable(items, "items")
    ensure_callable(action, "action")
    if lock is None:
        for item in items:
            action(item)
        return

    ensure_lock(lock)
    with lock:
        for item in items:
            action(item)


def to_string_iter(
    items: Iterable[Any], policy: NullItemPolicy | str = NullItemPolicy.REMOVE
) -> Iterator[str | None]:
    """Render items to strings with str().

    Arguments are validated when this function is called. With
    NullItemPolicy.RAISE the items are materialized and checked at call
    time, so the error is raised before anything is yielded. Otherwise the
    rendering is lazy.

    Args:
        items: Items to render.
        policy: How None items are handled.

    Returns:
        Iterator over the rendered strings. Under INCLUDE, None items
        are yielded as None.

    Raises:
        ArgumentNoneError: If items is None.
        InvalidOperationError: If policy is RAISE and an item is None.
    """
    ensure_iterable(items, "items")
    policy = _coerce_policy(policy)

    if policy is NullItemPolicy.RAISE:
        items = list(items)
        if any_none(items):
            raise InvalidOperationError("The iterable contains a None item.")

    keep_none = policy is NullItemPolicy.INCLUDE
    return (
        None if item is None else str(item)
        for item in items
        if keep_none or item is not None
    )


def join(
    items: Iterable[Any],
    separator: str,
    policy: NullItemPolicy | str = NullItemPolicy.REMOVE,
) -> str:
    """Render items to strings and join them with separator.

    Under NullItemPolicy.INCLUDE, None items contribute an empty string,
    so ``join(["a", None, "b"], ",", "include") == "a,,b"``.

    Raises:
        ArgumentNoneError: If items or separator is None.
        InvalidOperationError: If policy is RAISE and an item is None.
    """
    ensure_iterable(items, "items")
    ensure_str(separator, "separator")

    rendered = to_string_iter(items, policy)
    return separator.join("" if text is None else text for text in rendered)


def write_lines(items: Iterable[Any], sink: TextIO | None = None) -> None:
    """Write each non-None item on its own line.

    Args:
        items: Items to write. None items are skipped.
        sink: Text stream to write to. Defaults to sys.stdout, resolved
            at call time.

    Raises:
        ArgumentNoneError: If items is None.
    """
    ensure_iterable(items, "items")
    if sink is None:
        sink = sys.stdout

    count = 0
    for line in to_string_iter(items, NullItemPolicy.REMOVE):
        print(line, file=sink)
        count += 1
    logger.debug("Wrote %d lines", count, extra={"count": count})
