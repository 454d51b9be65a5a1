"""Error types raised by the storage layer.

Backend I/O failures other than the ones listed here (permission denied,
disk full, ...) are raised as the plain `OSError` the backend produced.
"""
from __future__ import annotations


class StoreError(Exception):
    """Base class for storage errors."""


class RecordNotFound(StoreError, KeyError):
    """Raised when reading an entry that does not exist.

    Subclasses `KeyError` so callers written against the `KeyError`
    convention of the backends keep working.
    """

    def __init__(self, item_type: str, name: str) -> None:
        super().__init__(item_type, name)
        self.item_type = item_type
        self.name = name

    def __str__(self) -> str:
        return f"record {self.item_type}/{self.name} does not exist"


class ConfigurationError(StoreError):
    """A storage path exists but is not usable (e.g. not a directory)."""


class ConnectError(StoreError):
    """The backing store failed to connect."""


class CloseError(StoreError):
    """The backing store failed to close."""
