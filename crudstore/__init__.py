"""Key-blob storage with transparent connection lifecycle management."""

from .storage import (
    Store,
    StoreError,
    RecordNotFound,
    ConfigurationError,
    ConnectError,
    CloseError,
    FileSystemStore,
    MemoryStore,
    BackingStore,
    create_store,
)
from .config import StoreConfig, load_config

__all__ = [
    "Store",
    "StoreError",
    "RecordNotFound",
    "ConfigurationError",
    "ConnectError",
    "CloseError",
    "FileSystemStore",
    "MemoryStore",
    "BackingStore",
    "create_store",
    "StoreConfig",
    "load_config",
]
