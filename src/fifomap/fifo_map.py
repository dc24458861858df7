"""Size-limited mapping with first-in-first-out eviction.

`BoundedFifoMap` behaves like a regular mutable mapping with a fixed maximum
size: once full, adding a new key drops the oldest key still present.
Overwriting a key keeps its original position, and reads never affect order.

It is deliberately not a `dict` subclass. A dict promises that `m[k] = v`
followed by operations that leave `k` alone will still find `v`; a bounded
map can evict `k` as a side effect of inserting something else.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections import OrderedDict
from collections.abc import (
    Callable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from types import MethodType
from typing import TYPE_CHECKING, Any, TypeVar

from fifomap.errors import InvalidCapacityError

if TYPE_CHECKING:
    from fifomap.config import FifoMapConfig

logger = logging.getLogger("fifomap")

K = TypeVar("K")
V = TypeVar("V")
M = TypeVar("M", bound="BoundedFifoMap[Any, Any]")


def _validate_capacity(capacity: object) -> int:
    # bool is an Integral, but `BoundedFifoMap(True)` is always a mistake.
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Real):
        raise InvalidCapacityError(
            f"Capacity must be a number, got {type(capacity).__name__}."
        )
    if isinstance(capacity, numbers.Rational):
        # Exact types (int, Fraction) never pass through float, so size is unbounded.
        if capacity < 1:
            raise InvalidCapacityError(f"Capacity must be at least 1, got {capacity!r}.")
        if capacity.denominator != 1:
            raise InvalidCapacityError(f"Capacity must be a whole number, got {capacity!r}.")
        return int(capacity)
    if math.isnan(capacity):
        raise InvalidCapacityError("Capacity must be a number, got NaN.")
    if capacity < 1 or math.isinf(capacity):
        raise InvalidCapacityError(
            f"Capacity must be at least 1 and finite, got {capacity!r}."
        )
    if not float(capacity).is_integer():
        raise InvalidCapacityError(f"Capacity must be a whole number, got {capacity!r}.")
    return int(capacity)


class BoundedFifoMap(MutableMapping[K, V]):
    """Mapping holding at most `capacity` entries, evicting in insertion order.

    The store is an `OrderedDict`, whose head is always the next eviction
    candidate: every key ahead of it has already been evicted, keys removed
    through `delete`/`del` are unlinked, and new keys are appended behind all
    live ones. Overwrites leave the order untouched.

    The `keys()`, `values()`, `items()` and `entries()` views are live and
    restartable. Adding or removing keys while iterating one of them raises
    `RuntimeError`; use `for_each` or iterate over `list(m.items())` instead.
    """

    def __init__(
        self,
        capacity: int,
        entries: Mapping[K, V] | Iterable[tuple[K, V]] | None = None,
    ) -> None:
        self._capacity = _validate_capacity(capacity)
        self._store: OrderedDict[K, V] = OrderedDict()
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                self.set(key, value)

    @classmethod
    def from_config(
        cls,
        config: FifoMapConfig,
        entries: Mapping[K, V] | Iterable[tuple[K, V]] | None = None,
    ) -> BoundedFifoMap[K, V]:
        """Build a map sized by a loaded `FifoMapConfig`."""

        return cls(config.capacity, entries)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return len(self._store)

    def set(self: M, key: K, value: V) -> M:
        """Set, or overwrite, the value for `key` and return the map.

        When a new key arrives and the map is full, the oldest entry is evicted
        first. Overwriting an existing key never evicts.
        """

        if key in self._store:
            self._store[key] = value
            return self

        if len(self._store) >= self._capacity:
            self._evict_oldest()

        self._store[key] = value
        return self

    def get(self, key: K, default: V | None = None) -> V | None:  # type: ignore[override]
        return self._store.get(key, default)

    def has(self, key: object) -> bool:
        return key in self._store

    def delete(self, key: K) -> bool:
        """Remove `key` if present; return whether anything was removed."""

        if key not in self._store:
            return False
        del self._store[key]
        return True

    def clear(self) -> None:
        dropped = len(self._store)
        self._store.clear()
        logger.debug("cleared %d entries (capacity=%d)", dropped, self._capacity)

    def entries(self) -> ItemsView[K, V]:
        return self._store.items()

    def items(self) -> ItemsView[K, V]:
        return self._store.items()

    def keys(self) -> KeysView[K]:
        return self._store.keys()

    def values(self) -> ValuesView[V]:
        return self._store.values()

    def for_each(
        self,
        callback: Callable[..., object],
        context: object | None = None,
    ) -> None:
        """Call `callback(value, key, map)` for each entry in insertion order.

        If `context` is given the callback is bound to it, so it receives
        `context` as its first argument; an already-bound method cannot be
        rebound and raises `TypeError`.

        The callback may mutate the map. Keys are taken before the first call;
        a key removed by an earlier call is skipped, an overwritten key is
        passed with its current value, and keys added during the walk are not
        visited.
        """

        if context is not None and isinstance(callback, MethodType):
            raise TypeError("for_each() cannot bind a context to an already-bound method.")
        fn = MethodType(callback, context) if context is not None else callback
        for key in list(self._store):
            if key not in self._store:
                continue
            fn(self._store[key], key, self)

    def copy(self) -> BoundedFifoMap[K, V]:
        return type(self)(self._capacity, self._store.items())

    def _evict_oldest(self) -> None:
        # Only reachable with len(store) >= capacity >= 1.
        assert self._store, "eviction requested on an empty map"
        key, _ = self._store.popitem(last=False)
        logger.debug("evicted key %r (capacity=%d)", key, self._capacity)

    # MutableMapping protocol

    def __getitem__(self, key: K) -> V:
        return self._store[key]

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        del self._store[key]

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[K]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, {dict(self._store)!r})"
