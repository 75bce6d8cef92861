"""In-process implementation of the cache manager."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from src.common.caching.cache_key import CacheKey
from src.common.caching.cache_manager import ICacheManager
from src.common.config.settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _detach(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value


@dataclass
class MemoryCacheEntry:
    """Cached value with its expiry (monotonic seconds)."""

    value: Any
    namespace: str
    expires_at: float

    @property
    def is_expired(self) -> bool:
        return time.monotonic() >= self.expires_at


class MemoryCacheManager(ICacheManager):
    """
    Keeps values in a dict, indexed by namespace for bulk invalidation.

    Cached lists are handed out as shallow copies; the entities inside are shared.
    """

    def __init__(self, default_cache_time: int | None = None) -> None:
        self.default_cache_time = (
            settings.CACHE_DEFAULT_TIME_MINUTES if default_cache_time is None else default_cache_time
        )
        self._entries: dict[str, MemoryCacheEntry] = {}
        self._namespaces: dict[str, set[str]] = {}
        self._lock = threading.Lock()

    def _cache_time(self, key: CacheKey) -> int:
        return self.default_cache_time if key.cache_time is None else key.cache_time

    def _lookup(self, key: CacheKey) -> tuple[bool, Any]:
        with self._lock:
            entry = self._entries.get(key.key)
            if entry is None:
                return False, None
            if entry.is_expired:
                self._discard(key.key)
                return False, None
            return True, entry.value

    def _discard(self, key: str) -> None:
        """Drops a key from both indexes. Caller holds the lock."""
        entry = self._entries.pop(key, None)
        if entry is None:
            return
        keys = self._namespaces.get(entry.namespace)
        if keys is not None:
            keys.discard(key)
            if not keys:
                del self._namespaces[entry.namespace]

    def get(self, key: CacheKey, acquire: Callable[[], T]) -> T:
        found, value = self._lookup(key)
        if found:
            logger.debug(f"Cache hit: {key.key}")
            return _detach(value)

        logger.debug(f"Cache miss: {key.key}")
        result = acquire()
        self.set(key, result)
        return _detach(result)

    def set(self, key: CacheKey, value: Any) -> None:
        # None is never cached so absent entities are looked up again
        if value is None:
            return
        cache_time = self._cache_time(key)
        if cache_time <= 0:
            return

        with self._lock:
            self._discard(key.key)
            self._entries[key.key] = MemoryCacheEntry(
                value=value, namespace=key.namespace, expires_at=time.monotonic() + cache_time * 60
            )
            self._namespaces.setdefault(key.namespace, set()).add(key.key)

    def is_set(self, key: CacheKey) -> bool:
        found, _ = self._lookup(key)
        return found

    def remove(self, key: CacheKey) -> None:
        with self._lock:
            self._discard(key.key)

    def clear_namespace(self, namespace: str) -> None:
        with self._lock:
            keys = self._namespaces.pop(namespace, set())
            for key in keys:
                self._entries.pop(key, None)
        logger.debug(f"Cleared {len(keys)} cache entries in namespace '{namespace}'")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._namespaces.clear()
