"""File-backed store.

Each item type is a directory below `base_directory` and each entry is a
file named `<name>.<extension>` holding the exact blob that was saved:
`<base_directory>/<item_type>/<name>.<extension>`.
Writes go to a temporary file that is then renamed over the target.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List

from .base import Store
from .errors import ConfigurationError, RecordNotFound

logger = logging.getLogger(__name__)


class FileSystemStore(Store):
    def __init__(self, base_directory: str | Path = "./data", file_extension: str = "json") -> None:
        self.base_directory = Path(base_directory)
        self.file_extension = file_extension.lstrip(".")

    @property
    def suffix(self) -> str:
        return f".{self.file_extension}" if self.file_extension else ""

    def _ensure(self, item_type: str) -> Path:
        target = self.base_directory / item_type
        if target.is_dir():
            return target
        # exist_ok tolerates another caller creating the directory first;
        # only a non-directory at the path raises FileExistsError
        try:
            target.mkdir(parents=True, exist_ok=True)
        except FileExistsError:
            raise ConfigurationError(f"storage path {target} exists, but is not a directory") from None
        logger.debug("Created storage directory %s", target)
        return target

    def _path_for(self, item_type: str, name: str) -> Path:
        return self._ensure(item_type) / f"{name}{self.suffix}"

    def list(self, item_type: str) -> List[str]:
        directory = self._ensure(item_type)
        names = []
        for p in directory.iterdir():
            if p.is_file() and p.suffix == self.suffix:
                names.append(p.stem)
        return names

    def save(self, item_type: str, name: str, data: bytes) -> None:
        path = self._path_for(item_type, name)
        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "wb") as f:
                f.write(bytes(data))
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("FileSystemStore saved %s (%d bytes)", path, len(data))

    def read(self, item_type: str, name: str) -> bytes:
        path = self._path_for(item_type, name)
        if not path.exists():
            raise RecordNotFound(item_type, name)
        with open(path, "rb") as f:
            data = f.read()
        logger.debug("FileSystemStore loaded %s (%d bytes)", path, len(data))
        return data

    def delete(self, item_type: str, name: str) -> None:
        # A missing file surfaces as FileNotFoundError
        self._path_for(item_type, name).unlink()

    def configure(self, **options) -> None:
        base = options.get("base_directory")
        if base:
            self.base_directory = Path(base)
        ext = options.get("file_extension")
        if ext is not None:
            self.file_extension = ext.lstrip(".")
