"""Memoization of computed statistics."""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from .locks import KeyedLocks
from ..models.records import StatisticKind

logger = logging.getLogger(__name__)

CacheKey = Tuple[StatisticKind, int]

_MISSING = object()


class StatisticCache:
    """Thread-safe map from (statistic kind, ZIP code) to a computed result.
    
    Single reads and writes are atomic dict operations. ``get_or_compute``
    additionally serializes computation per key, so concurrent misses on the
    same key compute once while other keys proceed in parallel.
    
    There is no selective invalidation; ``clear`` drops everything.
    """
    
    def __init__(self):
        self._values: Dict[CacheKey, Any] = {}
        self._locks = KeyedLocks()
    
    def get(self, key: CacheKey) -> Optional[Any]:
        """Return the cached value, or None on a miss."""
        return self._values.get(key)
    
    def put(self, key: CacheKey, value: Any) -> None:
        self._values[key] = value
    
    def get_or_compute(self, key: CacheKey, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing and storing it on a miss.
        
        Args:
            key: (statistic kind, ZIP code)
            compute: Zero-argument function producing the value
            
        Returns:
            Cached or freshly computed value
        """
        value = self._values.get(key, _MISSING)
        if value is not _MISSING:
            return value
        
        with self._locks.lock_for(key):
            value = self._values.get(key, _MISSING)
            if value is _MISSING:
                kind, zip_code = key
                logger.debug(f"Cache miss for {kind.value} in ZIP {zip_code}")
                value = compute()
                self._values[key] = value
        return value
    
    def clear(self) -> None:
        self._values.clear()
    
    def __contains__(self, key: CacheKey) -> bool:
        return key in self._values
    
    def __len__(self) -> int:
        return len(self._values)
