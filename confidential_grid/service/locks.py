"""
Keyed Locks - One mutex per identity
"""
import threading
from contextlib import contextmanager
from typing import Dict


class KeyedLocks:
    """
    Lazily created per-key locks.

    Requests for the same key are serialized; different keys never contend
    beyond the short critical section that looks the lock up.
    """

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: str):
        lock = self._lock_for(key)
        with lock:
            yield
