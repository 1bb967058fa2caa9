"""Tests for the renderer-owned template cache."""

import pytest

from mizui.infrastructure.cache import LRUEviction, TemplateCache, build_cache


def test_default_cache_never_evicts():
    cache = TemplateCache()
    for i in range(500):
        cache.set(f"k{i}", i)
    assert len(cache) == 500
    assert cache.get("k0") == 0


def test_get_or_create_builds_once():
    cache = TemplateCache()
    calls = []

    def factory():
        calls.append(1)
        return "value"

    assert cache.get_or_create("k", factory) == "value"
    assert cache.get_or_create("k", factory) == "value"
    assert len(calls) == 1


def test_factory_error_stores_nothing():
    cache = TemplateCache()

    def boom():
        raise ValueError("nope")

    with pytest.raises(ValueError):
        cache.get_or_create("k", boom)
    assert "k" not in cache


def test_lru_eviction_drops_least_recently_used():
    cache = TemplateCache(LRUEviction(2))
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)
    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache


def test_build_cache_from_size():
    assert isinstance(build_cache(None), TemplateCache)
    bounded = build_cache(1)
    bounded.set("a", 1)
    bounded.set("b", 2)
    assert len(bounded) == 1


def test_lru_requires_positive_size():
    with pytest.raises(ValueError):
        LRUEviction(0)
