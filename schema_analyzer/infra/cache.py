"""
Key-derived memoization caches

The analyzer stores schema snapshots, junction table lists and shortest
paths here, keyed by ``<prefix>_<operation>_<arguments>``. The graph
core never touches a cache.
"""

from typing import Any, Callable, Dict, Optional

from loguru import logger


class Cache:
    """Minimal cache interface"""

    def fetch(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when missing"""
        raise NotImplementedError

    def contains(self, key: str) -> bool:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key`` or compute and store it."""
        if self.contains(key):
            logger.debug(f"Cache hit: {key}")
            return self.fetch(key)
        value = compute()
        self.save(key, value)
        return value


class DictCache(Cache):
    """In-process cache backed by a dict"""

    def __init__(self):
        self._items: Dict[str, Any] = {}

    def fetch(self, key: str) -> Optional[Any]:
        return self._items.get(key)

    def contains(self, key: str) -> bool:
        return key in self._items

    def save(self, key: str, value: Any) -> None:
        self._items[key] = value

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class VoidCache(Cache):
    """Cache that never stores anything"""

    def fetch(self, key: str) -> Optional[Any]:
        return None

    def contains(self, key: str) -> bool:
        return False

    def save(self, key: str, value: Any) -> None:
        pass

    def clear(self) -> None:
        pass
