"""Unit tests for the query cache."""
from datetime import datetime, timedelta, timezone

import pytest

from menucost.core import cache as cache_module
from menucost.core.cache import QueryCache


class TestQueryCache:
    @pytest.fixture
    def cache(self) -> QueryCache:
        return QueryCache(ttl_seconds=60)

    def test_miss_returns_default(self, cache):
        assert cache.get(("menus", 2026, 3)) is None
        assert cache.get(("menus", 2026, 3), []) == []

    def test_set_and_get(self, cache):
        cache.set(("menus", 2026, 3, None), ["a"])
        assert cache.get(("menus", 2026, 3, None)) == ["a"]
        assert len(cache) == 1

    def test_invalidate_drops_only_matching_scopes(self, cache):
        cache.set(("menus", "month", 2026, 3), 1)
        cache.set(("menus", "year", 2026), 2)
        cache.set(("kits", "all"), 3)

        assert cache.invalidate("menus") == 2
        assert cache.get(("menus", "month", 2026, 3)) is None
        assert cache.get(("kits", "all")) == 3

    def test_invalidate_several_scopes(self, cache):
        cache.set(("menus", 1), 1)
        cache.set(("products", 1), 2)
        cache.set(("users", 1), 3)
        assert cache.invalidate("menus", "products") == 2
        assert len(cache) == 1

    def test_expired_entry_is_a_miss(self, cache, monkeypatch):
        cache.set(("menus", 1), "stale")
        later = datetime.now(timezone.utc) + timedelta(seconds=61)

        class _Later(datetime):
            @classmethod
            def now(cls, tz=None):
                return later

        monkeypatch.setattr(cache_module, "datetime", _Later)
        assert cache.get(("menus", 1)) is None
        assert len(cache) == 0

    def test_clear(self, cache):
        cache.set(("menus", 1), 1)
        cache.clear()
        assert len(cache) == 0
