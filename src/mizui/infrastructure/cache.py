"""Renderer-owned cache for raw template text and compiled templates.

One mapping holds both kinds of entry: raw text keyed by template identifier
(`str`) and compiled templates keyed by their interpolated `Program`. Entries are
never invalidated when the underlying file changes; only the eviction policy (if
any) removes them.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Any, Protocol


class EvictionPolicy(Protocol):
    def touch(self, entries: OrderedDict[Hashable, Any], key: Hashable) -> None: ...

    def after_write(self, entries: OrderedDict[Hashable, Any]) -> None: ...


class NoEviction:
    """Keep every entry for the cache's lifetime."""

    def touch(self, entries: OrderedDict[Hashable, Any], key: Hashable) -> None:
        return None

    def after_write(self, entries: OrderedDict[Hashable, Any]) -> None:
        return None


class LRUEviction:
    """Drop least-recently-used entries once `max_entries` is exceeded."""

    def __init__(self, max_entries: int):
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.max_entries = max_entries

    def touch(self, entries: OrderedDict[Hashable, Any], key: Hashable) -> None:
        entries.move_to_end(key)

    def after_write(self, entries: OrderedDict[Hashable, Any]) -> None:
        while len(entries) > self.max_entries:
            entries.popitem(last=False)


class TemplateCache:
    def __init__(self, policy: EvictionPolicy | None = None):
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self._policy = policy or NoEviction()
        self._lock = threading.RLock()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            if key not in self._entries:
                return default
            self._policy.touch(self._entries, key)
            return self._entries[key]

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
            self._policy.after_write(self._entries)

    def get_or_create(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Return the entry for `key`, building it with `factory` on a miss.

        The check and the write happen under one lock so concurrent callers build
        each entry once. Factory exceptions propagate and nothing is stored.
        """
        with self._lock:
            if key in self._entries:
                self._policy.touch(self._entries, key)
                return self._entries[key]
            value = factory()
            self._entries[key] = value
            self._policy.after_write(self._entries)
            return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def build_cache(cache_size: int | None) -> TemplateCache:
    if cache_size is None:
        return TemplateCache()
    return TemplateCache(LRUEviction(cache_size))


__all__ = ["EvictionPolicy", "LRUEviction", "NoEviction", "TemplateCache", "build_cache"]
