"""Cache manager interface."""
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from src.common.caching.cache_key import CacheKey

T = TypeVar("T")


class ICacheManager(ABC):
    @abstractmethod
    def get(self, key: CacheKey, acquire: Callable[[], T]) -> T:
        """Returns the cached value, loading and storing it with ``acquire`` on a miss."""
        pass

    @abstractmethod
    def set(self, key: CacheKey, value: Any) -> None:
        """Stores a value under the key."""
        pass

    @abstractmethod
    def remove(self, key: CacheKey) -> None:
        """Removes a single key."""
        pass

    @abstractmethod
    def clear_namespace(self, namespace: str) -> None:
        """Removes every key stored under the namespace."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Removes everything."""
        pass
