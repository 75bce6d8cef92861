"""Tests for the in-memory cache manager."""

from unittest.mock import Mock

import pytest

from src.common.caching.cache_key import CacheKey
from src.common.caching.memory_cache_manager import MemoryCacheManager

ALL_KEY = CacheKey("customerattributes.all", "customerattributes.")
BY_ID_KEY = CacheKey("customerattributes.id-{0}", "customerattributes.")
VALUES_KEY = CacheKey("customerattributevalues.all-{0}", "customerattributevalues.")


def test_cache_key_create_formats_template() -> None:
    key = BY_ID_KEY.create(5)

    assert key == CacheKey("customerattributes.id-5", "customerattributes.")
    assert BY_ID_KEY.key == "customerattributes.id-{0}"


class TestMemoryCacheManager:
    def setup_method(self) -> None:
        self.cache = MemoryCacheManager(default_cache_time=60)

    def test_get_loads_once_then_hits(self) -> None:
        loader = Mock(return_value=["a"])

        assert self.cache.get(ALL_KEY, loader) == ["a"]
        assert self.cache.get(ALL_KEY, loader) == ["a"]

        loader.assert_called_once()
        assert self.cache.is_set(ALL_KEY)

    def test_mutating_returned_list_does_not_change_cache(self) -> None:
        first = self.cache.get(ALL_KEY, lambda: ["a", "b"])
        first.append("c")

        second = self.cache.get(ALL_KEY, lambda: ["never loaded"])
        second.sort(reverse=True)

        assert self.cache.get(ALL_KEY, lambda: ["never loaded"]) == ["a", "b"]

    def test_none_is_not_cached(self) -> None:
        loader = Mock(return_value=None)

        self.cache.get(BY_ID_KEY.create(1), loader)
        self.cache.get(BY_ID_KEY.create(1), loader)

        assert loader.call_count == 2

    def test_clear_namespace_only_removes_that_namespace(self) -> None:
        self.cache.set(ALL_KEY, ["a"])
        self.cache.set(BY_ID_KEY.create(1), "one")
        self.cache.set(VALUES_KEY.create(1), ["v"])

        self.cache.clear_namespace("customerattributes.")

        assert not self.cache.is_set(ALL_KEY)
        assert not self.cache.is_set(BY_ID_KEY.create(1))
        assert self.cache.is_set(VALUES_KEY.create(1))

    def test_clear_unknown_namespace_is_a_no_op(self) -> None:
        self.cache.set(ALL_KEY, ["a"])

        self.cache.clear_namespace("vendorattributes.")

        assert self.cache.is_set(ALL_KEY)

    def test_remove_single_key(self) -> None:
        self.cache.set(ALL_KEY, ["a"])
        self.cache.set(BY_ID_KEY.create(1), "one")

        self.cache.remove(ALL_KEY)

        assert not self.cache.is_set(ALL_KEY)
        assert self.cache.is_set(BY_ID_KEY.create(1))

    def test_clear_removes_everything(self) -> None:
        self.cache.set(ALL_KEY, ["a"])
        self.cache.set(VALUES_KEY.create(2), ["v"])

        self.cache.clear()

        assert not self.cache.is_set(ALL_KEY)
        assert not self.cache.is_set(VALUES_KEY.create(2))

    def test_entries_expire(self, mocker) -> None:
        monotonic = mocker.patch("src.common.caching.memory_cache_manager.time.monotonic", return_value=1000.0)
        self.cache.set(ALL_KEY, ["a"])

        monotonic.return_value = 1000.0 + 59 * 60
        assert self.cache.is_set(ALL_KEY)

        monotonic.return_value = 1000.0 + 60 * 60
        assert not self.cache.is_set(ALL_KEY)

    def test_key_cache_time_overrides_default(self, mocker) -> None:
        monotonic = mocker.patch("src.common.caching.memory_cache_manager.time.monotonic", return_value=0.0)
        short_key = CacheKey("customerattributes.short", "customerattributes.", cache_time=1)
        self.cache.set(short_key, "x")

        monotonic.return_value = 61.0

        assert not self.cache.is_set(short_key)

    @pytest.mark.parametrize("cache_time", [0, -1])
    def test_non_positive_cache_time_disables_caching(self, cache_time) -> None:
        key = CacheKey("customerattributes.nocache", "customerattributes.", cache_time=cache_time)
        loader = Mock(return_value="x")

        self.cache.get(key, loader)
        self.cache.get(key, loader)

        assert loader.call_count == 2

    def test_default_cache_time_comes_from_settings(self, mocker) -> None:
        from src.common.config.settings import settings

        mocker.patch.object(settings, "CACHE_DEFAULT_TIME_MINUTES", 5)

        assert MemoryCacheManager().default_cache_time == 5
