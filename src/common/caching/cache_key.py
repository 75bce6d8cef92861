"""Cache key value object."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CacheKey:
    """A cache key bound to the namespace it is invalidated with.

    ``key`` may be a ``str.format`` template; call :meth:`create` to fill it in.
    ``cache_time`` is in minutes, None means the cache manager default.
    """

    key: str
    namespace: str
    cache_time: int | None = None

    def create(self, *params: object) -> "CacheKey":
        """Returns a copy of this key with the template filled in."""
        return replace(self, key=self.key.format(*params))
