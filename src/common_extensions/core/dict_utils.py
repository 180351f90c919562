"""Dictionary helpers.

Provides get-or-create and add-or-replace over any mutable mapping, plus
ConcurrentDict, a mapping whose get-or-add is a single atomic step.

On a plain dict, get_or_create is a check followed by an insert. Callers
sharing a plain dict between threads must serialize those calls
themselves; use ConcurrentDict when the insert-if-absent step has to be
atomic.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from collections.abc import Callable, Iterator, MutableMapping
from typing import Any, Generic, TypeVar

from common_extensions.core.errors import InvalidArgumentError
from common_extensions.core.validation import ensure_callable, ensure_not_none

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

# Marks "no default given", so an explicit None can be rejected.
_UNSET: Any = object()


def _ensure_mapping(mapping: Any, param_name: str = "mapping") -> None:
    ensure_not_none(mapping, param_name)
    if not isinstance(mapping, MutableMapping):
        raise InvalidArgumentError(
            f"expected a mutable mapping, got {type(mapping).__name__}", param_name
        )


def _resolve_factory(
    mapping: MutableMapping[Any, Any],
    default: Any,
    factory: Callable[[], Any] | None,
) -> Callable[[], Any] | None:
    """Pick the source of a new value, validating explicit arguments.

    Returns None when nothing can produce a value. That is only an error
    once a key turns out to be missing.
    """
    if default is not _UNSET:
        ensure_not_none(default, "default")
        return lambda: default
    if factory is not None:
        return ensure_callable(factory, "factory")
    if isinstance(mapping, defaultdict) and mapping.default_factory is not None:
        return mapping.default_factory
    return None


def _missing_value_source() -> InvalidArgumentError:
    return InvalidArgumentError(
        "a default value or factory is required to create a missing value",
        "default",
    )


class ConcurrentDict(MutableMapping[K, V], Generic[K, V]):
    """Thread-safe mapping with an atomic get-or-add.

    All reads and writes take an internal reentrant lock. Iteration runs
    over a snapshot of the keys taken under the lock, so concurrent
    writers never invalidate an iterator.

    Example:
        counters: ConcurrentDict[str, list[int]] = ConcurrentDict()
        bucket = counters.get_or_add("hits", factory=list)
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._lock = threading.RLock()
        self._data: dict[K, V] = dict(*args, **kwargs)

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def __delitem__(self, key: K) -> None:
        with self._lock:
            del self._data[key]

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            keys = list(self._data)
        return iter(keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot()!r})"

    def __copy__(self) -> ConcurrentDict[K, V]:
        return type(self)(self.snapshot())

    def snapshot(self) -> dict[K, V]:
        """Return a plain dict copy taken under the lock."""
        with self._lock:
            return dict(self._data)

    def try_add(self, key: K, value: V) -> bool:
        """Insert value under key only if key is absent.

        Returns:
            True if the value was inserted, False if key already existed.
        """
        with self._lock:
            if key in self._data:
                return False
            self._data[key] = value
            return True

    def get_or_add(
        self,
        key: K,
        value: V = _UNSET,
        *,
        factory: Callable[[], V] | None = None,
    ) -> V:
        """Return the value for key, inserting one atomically if absent.

        Exactly one concurrent caller inserts for a missing key; every
        caller observes the stored value. The factory runs only for the
        caller whose insert wins.

        Args:
            key: Key to look up.
            value: Value to insert when key is absent.
            factory: Zero-argument callable producing the value to insert,
                used when value is not given.

        Raises:
            ArgumentNoneError: If key or an explicit value is None.
            InvalidArgumentError: If key is absent and neither value nor
                factory is given.
        """
        ensure_not_none(key, "key")
        create = _resolve_factory(self, value, factory)

        with self._lock:
            if key in self._data:
                return self._data[key]
            if create is None:
                raise _missing_value_source()
            created = create()
            self._data[key] = created
            return created


def get_or_create(
    mapping: MutableMapping[K, V],
    key: K,
    default: V = _UNSET,
    *,
    factory: Callable[[], V] | None = None,
) -> V:
    """Return the value for key, inserting a new one first if absent.

    The inserted value is default when given, otherwise factory(),
    otherwise the mapping's own default_factory for a defaultdict.

    Args:
        mapping: Mapping to read from and insert into.
        key: Key to look up.
        default: Value to insert when key is absent.
        factory: Zero-argument callable producing the value to insert.

    Returns:
        The existing value, or the value just inserted.

    Raises:
        ArgumentNoneError: If mapping, key or an explicit default is None.
        InvalidArgumentError: If key is absent and no value source is
            available, or factory is not callable.
    """
    _ensure_mapping(mapping)
    ensure_not_none(key, "key")

    if isinstance(mapping, ConcurrentDict):
        return mapping.get_or_add(key, default, factory=factory)

    create = _resolve_factory(mapping, default, factory)

    if key in mapping:
        return mapping[key]
    if create is None:
        raise _missing_value_source()

    value = create()
    mapping[key] = value
    logger.debug("Inserted new value for key %r", key, extra={"key": key})
    return value


def add_or_replace(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    """Set mapping[key] to value, inserting or overwriting.

    A None value is stored as-is.

    Raises:
        ArgumentNoneError: If mapping or key is None.
    """
    _ensure_mapping(mapping)
    ensure_not_none(key, "key")

    mapping[key] = value
