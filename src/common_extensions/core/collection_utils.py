"""Collection mutators.

Helpers that add to or replace the contents of a caller-owned mutable
container in place. Sequences are appended to; sets are added to.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, MutableSet
from typing import Any, TypeVar

from common_extensions.core.errors import InvalidArgumentError
from common_extensions.core.validation import ensure_iterable, ensure_not_none

T = TypeVar("T")


def _ensure_mutable_container(target: Any, param_name: str) -> None:
    ensure_not_none(target, param_name)
    if not isinstance(target, (MutableSequence, MutableSet)):
        raise InvalidArgumentError(
            f"expected a mutable sequence or set, got {type(target).__name__}",
            param_name,
        )


def _extend(target: MutableSequence[T] | MutableSet[T], items: Iterable[T]) -> None:
    if isinstance(target, MutableSequence):
        for item in items:
            target.append(item)
    else:
        for item in items:
            target.add(item)


def append_all(
    target: MutableSequence[T] | MutableSet[T], source: Iterable[T]
) -> None:
    """Append every element of source to target, in iteration order.

    Duplicates and None elements are kept as-is. Appending a container
    to itself doubles it.

    Args:
        target: Mutable sequence or set to add to.
        source: Items to add. Consumed once.

    Raises:
        ArgumentNoneError: If target or source is None.
        InvalidArgumentError: If target is not a mutable container or
            source is not iterable.
    """
    _ensure_mutable_container(target, "target")
    ensure_iterable(source, "source")

    # Appending a list to itself must read only the existing elements
    items = list(source) if source is target else source
    _extend(target, items)


def replace_all(
    target: MutableSequence[T] | MutableSet[T], source: Iterable[T]
) -> None:
    """Replace the contents of target with the elements of source.

    Source is materialized before target is cleared, so replacing a
    container with itself, or with an iterator that fails part way,
    leaves target unchanged.

    Args:
        target: Mutable sequence or set to replace the contents of.
        source: Replacement items. Consumed once.

    Raises:
        ArgumentNoneError: If target or source is None.
        InvalidArgumentError: If target is not a mutable container or
            source is not iterable.
    """
    _ensure_mutable_container(target, "target")
    ensure_iterable(source, "source")

    items = list(source)
    target.clear()
    _extend(target, items)
