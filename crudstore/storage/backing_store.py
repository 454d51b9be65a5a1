"""Connection lifecycle management around another store.

`BackingStore` wraps a store that may need `connect()`/`close()` calls:

- `connect()` is called before an operation whenever the connection is closed.
- `close()` is called after each operation while `auto_close` is true (the
  default), whether the operation succeeded or not.

Set `auto_close = False` (or use `keep_open()`) to keep one connection open
across several operations, then call `close()` yourself. Instances are not
safe for concurrent use; serialize access externally.
"""
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List

from .base import Store
from .errors import CloseError, ConnectError
from .interfaces import Closable, Connectable, StoreProtocol

logger = logging.getLogger(__name__)


class BackingStore(Store):
    def __init__(self, store: StoreProtocol, auto_close: bool = True) -> None:
        self.auto_close = auto_close
        self._closed = True
        self._store = store

    @property
    def store(self) -> StoreProtocol:
        return self._store

    @property
    def connected(self) -> bool:
        return not self._closed

    def connect(self) -> None:
        """Connect the backing store unless it is already connected.

        Stores without a `connect()` method need no setup and this is a no-op.
        Raises `ConnectError` if the backing store fails to connect; the
        connection is then still considered closed.
        """
        if not self._closed:
            return
        if not isinstance(self._store, Connectable):
            return
        try:
            self._store.connect()
        except Exception as exc:
            raise ConnectError(f"connecting {type(self._store).__name__} failed: {exc}") from exc
        self._closed = False
        logger.debug("Connected %s", type(self._store).__name__)

    def close(self) -> None:
        """Close the backing store.

        Stores without a `close()` method need no teardown and this is a no-op.
        The connection counts as closed even if the backing close fails, in
        which case `CloseError` is raised.
        """
        if not isinstance(self._store, Closable):
            return
        self._closed = True
        try:
            self._store.close()
        except Exception as exc:
            raise CloseError(f"closing {type(self._store).__name__} failed: {exc}") from exc
        logger.debug("Closed %s", type(self._store).__name__)

    def _release(self) -> None:
        # Best-effort close after an operation; never masks its outcome.
        try:
            self.close()
        except CloseError:
            logger.debug("Ignoring failure to close %s", type(self._store).__name__, exc_info=True)

    def _call(self, op: Callable[..., Any], *args: Any) -> Any:
        self.connect()
        auto_close = self.auto_close
        try:
            return op(*args)
        finally:
            if auto_close:
                self._release()

    def list(self, item_type: str) -> List[str]:
        return self._call(self._store.list, item_type)

    def save(self, item_type: str, name: str, data: bytes) -> None:
        self._call(self._store.save, item_type, name, data)

    def read(self, item_type: str, name: str) -> bytes:
        return self._call(self._store.read, item_type, name)

    def delete(self, item_type: str, name: str) -> None:
        self._call(self._store.delete, item_type, name)

    @contextmanager
    def keep_open(self) -> Iterator["BackingStore"]:
        """Keep one connection open for every operation inside the block.

        `auto_close` is restored on exit; if it was true the connection is
        closed at the end of the block.
        """
        auto_close = self.auto_close
        self.auto_close = False
        try:
            yield self
        finally:
            self.auto_close = auto_close
            if auto_close:
                self._release()

    def read_all(self, item_type: str) -> List[bytes]:
        """Read every entry of `item_type` over a single connection.

        Errors propagate unchanged. When a `read` fails, the blobs read
        before it are attached to the raised error as `results`.
        """
        results: List[bytes] = []
        with self.keep_open():
            for name in self.list(item_type):
                try:
                    results.append(self.read(item_type, name))
                except Exception as exc:
                    exc.results = results
                    raise
        return results

    def configure(self, **options) -> None:
        if "auto_close" in options:
            self.auto_close = bool(options.pop("auto_close"))
        configure = getattr(self._store, "configure", None)
        if callable(configure):
            configure(**options)

    def __enter__(self) -> "BackingStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self._release()
