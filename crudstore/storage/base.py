"""Store interface definitions.

Defines the Store abstract class: a key-blob store holding named entries
grouped into collections called item types. Entries in different item
types never collide, even when they share a name.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Store(ABC):
    """Abstract key-blob store supporting CRUD operations.

    A store may additionally provide `connect()` and/or `close()`; see
    `crudstore.storage.interfaces` and `BackingStore`.
    """

    @abstractmethod
    def list(self, item_type: str) -> List[str]:
        """Return the names of all entries in `item_type`.

        An empty or absent collection yields an empty list. No ordering
        is guaranteed.
        """

    @abstractmethod
    def save(self, item_type: str, name: str, data: bytes) -> None:
        """Store `data` under `item_type`/`name`, overwriting any existing entry."""

    @abstractmethod
    def read(self, item_type: str, name: str) -> bytes:
        """Return the bytes stored under `item_type`/`name`.

        Must raise `RecordNotFound` if the entry does not exist.
        """

    @abstractmethod
    def delete(self, item_type: str, name: str) -> None:
        """Remove the entry.

        Deleting an entry that does not exist always raises; which error is
        raised is the backend's natural one (`RecordNotFound`,
        `FileNotFoundError`, ...).
        """

    def configure(self, **options) -> None:
        """Apply runtime options. Backends without options ignore them."""
        return
