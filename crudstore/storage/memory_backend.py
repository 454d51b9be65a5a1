"""Simple memory-backed store

This backend keeps blobs in memory as a data structure `[<item_type>][<name>]`.
"""
from threading import RLock
from typing import Dict, List

from .base import Store
from .errors import RecordNotFound


class MemoryStore(Store):
    def __init__(self):
        self._lock = RLock()
        self._store: Dict[str, Dict[str, bytes]] = {}

    def list(self, item_type: str) -> List[str]:
        with self._lock:
            return [name for name in self._store.get(item_type, {})]

    def save(self, item_type: str, name: str, data: bytes) -> None:
        with self._lock:
            self._store.setdefault(item_type, {})[name] = bytes(data)

    def read(self, item_type: str, name: str) -> bytes:
        with self._lock:
            try:
                return self._store[item_type][name]
            except KeyError:
                raise RecordNotFound(item_type, name) from None

    def delete(self, item_type: str, name: str) -> None:
        with self._lock:
            entries = self._store.get(item_type, {})
            if name not in entries:
                raise RecordNotFound(item_type, name)
            del entries[name]
