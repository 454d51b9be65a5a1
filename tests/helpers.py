from typing import Dict, List, Optional

from crudstore.storage import MemoryStore


class MockStore(MemoryStore):
    """In-memory store that records connect/close calls.

    `calls` holds the order of lifecycle and data calls, e.g.
    ``['connect', 'read', 'close']``. Set `connect_error`, `close_error`
    or `fail_on` to make the corresponding call raise.
    """

    def __init__(self, data: Optional[Dict[str, Dict[str, bytes]]] = None):
        super().__init__()
        self.connect_count = 0
        self.close_count = 0
        self.calls: List[str] = []
        self.connect_error: Optional[Exception] = None
        self.close_error: Optional[Exception] = None
        self.fail_on: Dict[str, Exception] = {}
        for item_type, entries in (data or {}).items():
            for name, blob in entries.items():
                super().save(item_type, name, blob)

    def connect(self) -> None:
        self.calls.append('connect')
        if self.connect_error is not None:
            raise self.connect_error
        self.connect_count += 1

    def close(self) -> None:
        self.calls.append('close')
        self.close_count += 1
        if self.close_error is not None:
            raise self.close_error

    def _maybe_fail(self, op: str, name: str = '') -> None:
        self.calls.append(op)
        err = self.fail_on.get(op) or self.fail_on.get(f'{op}:{name}')
        if err is not None:
            raise err

    def list(self, item_type):
        self._maybe_fail('list')
        return super().list(item_type)

    def save(self, item_type, name, data):
        self._maybe_fail('save', name)
        super().save(item_type, name, data)

    def read(self, item_type, name):
        self._maybe_fail('read', name)
        return super().read(item_type, name)

    def delete(self, item_type, name):
        self._maybe_fail('delete', name)
        super().delete(item_type, name)


class PlainStore(MemoryStore):
    """A store without connect/close."""
