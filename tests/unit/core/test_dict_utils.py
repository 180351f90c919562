"""Tests for core dictionary utilities."""

import logging
import threading
from collections import defaultdict

import pytest

from common_extensions.core.dict_utils import (
    ConcurrentDict,
    add_or_replace,
    get_or_create,
)
from common_extensions.core.errors import ArgumentNoneError, InvalidArgumentError


class TestGetOrCreate:
    """Tests for get_or_create function."""

    def test_returns_existing_value(self) -> None:
        """get_or_create returns the stored value without calling the factory."""
        calls: list[int] = []
        mapping = {"a": 1}

        def factory() -> int:
            calls.append(1)
            return 99

        assert get_or_create(mapping, "a", factory=factory) == 1
        assert calls == []
        assert mapping == {"a": 1}

    def test_inserts_default(self) -> None:
        """get_or_create inserts the default when the key is absent."""
        mapping: dict[str, int] = {}
        assert get_or_create(mapping, "a", 5) == 5
        assert mapping == {"a": 5}

    def test_logs_inserted_key(self, caplog: pytest.LogCaptureFixture) -> None:
        """get_or_create logs an insert with the key as a record field."""
        with caplog.at_level(logging.DEBUG, logger="common_extensions.core"):
            get_or_create({}, "a", 5)
            get_or_create({"b": 1}, "b")

        assert [r.key for r in caplog.records] == ["a"]

    def test_inserts_factory_value(self) -> None:
        """get_or_create inserts factory() and returns the same object."""
        mapping: dict[str, list[int]] = {}
        value = get_or_create(mapping, "a", factory=list)
        assert value == []
        assert mapping["a"] is value

    def test_second_call_returns_same_value(self) -> None:
        """Two calls for the same missing key share one inserted value."""
        mapping: dict[str, list[int]] = {}
        first = get_or_create(mapping, "a", factory=list)
        second = get_or_create(mapping, "a", factory=list)
        assert first is second
        assert len(mapping) == 1

    def test_uses_defaultdict_factory(self) -> None:
        """get_or_create falls back to a defaultdict's default_factory."""
        mapping: defaultdict[str, int] = defaultdict(int)
        assert get_or_create(mapping, "n") == 0
        assert dict(mapping) == {"n": 0}

    def test_falsy_existing_value_is_kept(self) -> None:
        """A stored falsy value counts as present."""
        mapping = {"a": 0}
        assert get_or_create(mapping, "a", 7) == 0

    def test_missing_value_source_raises(self) -> None:
        """get_or_create needs a default, factory or default_factory."""
        mapping: dict[str, int] = {}
        with pytest.raises(InvalidArgumentError):
            get_or_create(mapping, "a")
        assert mapping == {}

    def test_present_key_needs_no_value_source(self) -> None:
        """get_or_create returns an existing value without default or factory."""
        mapping = {"a": 1}
        assert get_or_create(mapping, "a") == 1
        assert mapping == {"a": 1}

    def test_non_callable_factory_raises_for_present_key(self) -> None:
        """An explicit non-callable factory is rejected even when key exists."""
        with pytest.raises(InvalidArgumentError):
            get_or_create({"a": 1}, "a", factory=42)

    def test_none_default_raises(self) -> None:
        """An explicit None default raises ArgumentNoneError."""
        with pytest.raises(ArgumentNoneError):
            get_or_create({}, "a", None)

    def test_none_key_raises(self) -> None:
        """A None key raises ArgumentNoneError."""
        with pytest.raises(ArgumentNoneError):
            get_or_create({}, None, 1)

    def test_none_mapping_raises(self) -> None:
        """A None mapping raises ArgumentNoneError."""
        with pytest.raises(ArgumentNoneError):
            get_or_create(None, "a", 1)

    def test_non_mapping_raises(self) -> None:
        """A non-mapping target raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            get_or_create([("a", 1)], "a", 1)

    def test_delegates_to_concurrent_dict(self) -> None:
        """get_or_create uses the atomic path for ConcurrentDict."""
        mapping: ConcurrentDict[str, int] = ConcurrentDict()
        assert get_or_create(mapping, "a", 3) == 3
        assert mapping.snapshot() == {"a": 3}


class TestAddOrReplace:
    """Tests for add_or_replace function."""

    def test_inserts_new_key(self) -> None:
        """add_or_replace inserts a missing key."""
        mapping: dict[str, int] = {}
        add_or_replace(mapping, "a", 1)
        assert mapping == {"a": 1}

    def test_overwrites_existing_key(self) -> None:
        """add_or_replace overwrites an existing value."""
        mapping = {"a": 1}
        add_or_replace(mapping, "a", 2)
        assert mapping == {"a": 2}

    def test_stores_none_value(self) -> None:
        """add_or_replace stores a None value as-is."""
        mapping = {"a": 1}
        add_or_replace(mapping, "a", None)
        assert mapping == {"a": None}

    def test_none_key_raises(self) -> None:
        """add_or_replace rejects a None key."""
        with pytest.raises(ArgumentNoneError):
            add_or_replace({}, None, 1)


class TestConcurrentDict:
    """Tests for ConcurrentDict."""

    def test_mapping_protocol(self) -> None:
        """ConcurrentDict behaves like a mutable mapping."""
        d: ConcurrentDict[str, int] = ConcurrentDict(a=1)
        d["b"] = 2
        assert len(d) == 2
        assert "a" in d
        assert sorted(d) == ["a", "b"]
        del d["a"]
        assert d.snapshot() == {"b": 2}
        assert d.get("missing") is None

    def test_try_add(self) -> None:
        """try_add inserts only when the key is absent."""
        d: ConcurrentDict[str, int] = ConcurrentDict()
        assert d.try_add("a", 1) is True
        assert d.try_add("a", 2) is False
        assert d["a"] == 1

    def test_iteration_tolerates_writes(self) -> None:
        """Iterating while inserting does not raise."""
        d: ConcurrentDict[int, int] = ConcurrentDict({1: 1, 2: 2})
        for key in d:
            d[key + 10] = key
        assert len(d) == 4

    def test_repr(self) -> None:
        """repr shows the contents."""
        assert repr(ConcurrentDict({"a": 1})) == "ConcurrentDict({'a': 1})"

    def test_get_or_add_is_atomic(self) -> None:
        """Concurrent get_or_add calls run the factory once and share one value."""
        d: ConcurrentDict[str, object] = ConcurrentDict()
        calls: list[int] = []
        results: list[object] = []
        barrier = threading.Barrier(8)

        def factory() -> object:
            calls.append(1)
            return object()

        def worker() -> None:
            barrier.wait()
            results.append(d.get_or_add("key", factory=factory))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_get_or_add_requires_value_source(self) -> None:
        """get_or_add raises when neither value nor factory is given."""
        d: ConcurrentDict[str, int] = ConcurrentDict()
        with pytest.raises(InvalidArgumentError):
            d.get_or_add("a")

    def test_get_or_add_present_key_needs_no_value_source(self) -> None:
        """get_or_add returns an existing value without value or factory."""
        d: ConcurrentDict[str, int] = ConcurrentDict(a=1)
        assert d.get_or_add("a") == 1
        assert d.snapshot() == {"a": 1}
