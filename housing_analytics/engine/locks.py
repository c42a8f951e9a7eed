"""Per-key locking for the engine's shared maps."""

import threading
from typing import Dict, Hashable


class KeyedLocks:
    """Hands out one lock per key so unrelated keys never contend."""
    
    def __init__(self):
        self._locks: Dict[Hashable, threading.Lock] = {}
    
    def lock_for(self, key: Hashable) -> threading.Lock:
        lock = self._locks.get(key)
        if lock is None:
            # setdefault is atomic, so racing threads end up with the same lock
            lock = self._locks.setdefault(key, threading.Lock())
        return lock
    
    def __len__(self) -> int:
        return len(self._locks)
