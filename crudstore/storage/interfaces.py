from typing import Protocol, List, runtime_checkable


@runtime_checkable
class StoreProtocol(Protocol):
    """Store protocol mirroring `crudstore.storage.Store`.

    Implementations should follow the semantics documented on the abstract
    base class in `crudstore.storage.base` (RecordNotFound for missing
    entries, upsert on save, etc.).
    """

    def list(self, item_type: str) -> List[str]: ...

    def save(self, item_type: str, name: str, data: bytes) -> None: ...

    def read(self, item_type: str, name: str) -> bytes: ...

    def delete(self, item_type: str, name: str) -> None: ...


@runtime_checkable
class Connectable(Protocol):
    """A store that must be connected before its methods are called."""

    def connect(self) -> None: ...


@runtime_checkable
class Closable(Protocol):
    """A store that must be closed to release its connection."""

    def close(self) -> None: ...
