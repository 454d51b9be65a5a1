"""Storage abstraction package for crudstore."""

from typing import Optional

from .base import Store
from .interfaces import StoreProtocol, Connectable, Closable
from .errors import (
    StoreError,
    RecordNotFound,
    ConfigurationError,
    ConnectError,
    CloseError,
)
from .file_backend import FileSystemStore
from .memory_backend import MemoryStore
from .backing_store import BackingStore


def create_store(config=None, **overrides) -> BackingStore:
    """Build a BackingStore over the backend described by `config`.

    `config` is a `crudstore.config.StoreConfig`; keyword overrides replace
    individual fields, e.g. `create_store(base_directory=tmp, auto_close=False)`.
    """
    from crudstore.config import StoreConfig

    cfg: Optional[StoreConfig] = config
    if cfg is None:
        cfg = StoreConfig(**overrides)
    elif overrides:
        cfg = cfg.model_copy(update=overrides)

    if cfg.backend == 'memory':
        backend: Store = MemoryStore()
    else:
        backend = FileSystemStore(cfg.base_directory, cfg.file_extension)
    return BackingStore(backend, auto_close=cfg.auto_close)


__all__ = [
    "Store",
    "StoreProtocol",
    "Connectable",
    "Closable",
    "StoreError",
    "RecordNotFound",
    "ConfigurationError",
    "ConnectError",
    "CloseError",
    "FileSystemStore",
    "MemoryStore",
    "BackingStore",
    "create_store",
]
