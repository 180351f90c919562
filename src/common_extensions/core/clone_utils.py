"""Shallow and deep clone of containers.

Clones keep the container kind: a list clones to a list, a deque to a
deque, a namedtuple to the same namedtuple, a defaultdict to a
defaultdict with the same default_factory. Other sequence and set
subclasses clone to a plain list.
Deep clones delegate to each element's own deep_clone() method (see
DeepCloneable) or to an explicit clone callable.

Both operations accept an optional lock token, held for the whole
read-and-copy and released on every exit path.
"""

from __future__ import annotations

import copy
import logging
from collections import deque
from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from common_extensions.core.dict_utils import ConcurrentDict
from common_extensions.core.errors import InvalidArgumentError
from common_extensions.core.validation import (
    ensure_callable,
    ensure_iterable,
    ensure_lock,
)

logger = logging.getLogger(__name__)

C = TypeVar("C")

# Containers whose constructor takes exactly one iterable of elements
_ITERABLE_CONSTRUCTED: frozenset[type] = frozenset({list, tuple, set, frozenset})


@runtime_checkable
class DeepCloneable(Protocol):
    """Protocol for objects that can produce an independent copy of themselves.

    Implementations return a new instance of the same concrete type and
    apply the same contract to any sub-objects they own.
    """

    def deep_clone(self) -> Any:
        """Return an independent copy of this object."""
        ...


def _clone_element(item: Any) -> Any:
    if not isinstance(item, DeepCloneable):
        raise InvalidArgumentError(
            f"{type(item).__name__} does not implement deep_clone()", "source"
        )
    return item.deep_clone()


def _ensure_cloneable_source(source: Any) -> None:
    ensure_iterable(source, "source")
    if isinstance(source, (str, bytes, bytearray)):
        raise InvalidArgumentError(
            f"cannot clone a {type(source).__name__} as a container", "source"
        )


def _rebuild(source: Any, convert: Callable[[Any], Any]) -> Any:
    """Build a new container of the same kind as source.

    Mapping values (not keys) and sequence or set elements are passed
    through convert. None elements are never passed to convert.
    """

    def _convert(item: Any) -> Any:
        return None if item is None else convert(item)

    if isinstance(source, (dict, ConcurrentDict)):
        # copy.copy keeps the concrete type and extras such as default_factory
        clone = copy.copy(source)
        for key in list(clone):
            clone[key] = _convert(clone[key])
        return clone

    if isinstance(source, Mapping):
        return {key: _convert(value) for key, value in source.items()}

    items = [_convert(item) for item in source]
    kind = type(source)
    if kind in _ITERABLE_CONSTRUCTED:
        return kind(items)
    if isinstance(source, deque):
        return deque(items, source.maxlen)
    if isinstance(source, tuple) and hasattr(kind, "_make"):
        return kind._make(items)

    # Other subclasses and plain iterables clone to a list
    logger.debug("Cloning %s to a list", kind.__name__)
    return items


def _clone(source: Any, lock: Any, convert: Callable[[Any], Any]) -> Any:
    if lock is None:
        return _rebuild(source, convert)

    ensure_lock(lock)
    with lock:
        return _rebuild(source, convert)


def shallow_clone(source: C, lock: Any = None) -> C:
    """Return a new container holding the same elements as source.

    Element references are shared with source. Sequences keep their
    order; mappings keep their key to value pairs. Read-only and custom
    mappings clone to a dict. Iterators, plain iterables and sequence or
    set subclasses other than namedtuples and deques clone to a list.

    Args:
        source: Container to clone.
        lock: Optional lock token held while source is read.

    Raises:
        ArgumentNoneError: If source is None.
        InvalidArgumentError: If source is a str or bytes, is not
            iterable, or lock is not a context manager.
    """
    _ensure_cloneable_source(source)
    return _clone(source, lock, lambda item: item)


def deep_clone(
    source: C,
    lock: Any = None,
    *,
    clone: Callable[[Any], Any] | None = None,
) -> C:
    """Return a new container holding independent copies of source's elements.

    Each element (each value, for a mapping) is replaced by clone(element).
    The default clone calls element.deep_clone(). None elements stay None.

    Args:
        source: Container to clone.
        lock: Optional lock token held while source is read and copied.
        clone: Optional callable producing the copy of one element.

    Raises:
        ArgumentNoneError: If source is None.
        InvalidArgumentError: If source is not a cloneable container, an
            element lacks deep_clone(), or lock is not a context manager.

    Errors raised by an element's clone are propagated unchanged.
    """
    _ensure_cloneable_source(source)
    convert = _clone_element if clone is None else ensure_callable(clone, "clone")
    return _clone(source, lock, convert)
