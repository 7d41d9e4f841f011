"""Key-value stores the save system writes through.

The engine only ever needs ``get(key)`` / ``set(key, value)`` of a serialised
blob, so any backend that offers those two calls will do.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol


class StoreWriteError(OSError):
    """The backing store could not persist a value."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store. Used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class FileStore:
    """One ``<key>.json`` file per key inside ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp = path.with_suffix(".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise StoreWriteError(f"could not write {path}: {exc}") from exc
