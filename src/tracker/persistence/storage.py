"""Key-value blob stores backing the tracker's persisted state."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..config import settings


class StorageError(Exception):
    """Raised when the persistence layer cannot read or write a value."""


class StorageQuotaExceeded(StorageError):
    """Raised when a write would exceed the store's capacity."""


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class FileKeyValueStore:
    """Stores each key as a UTF-8 file under the data root."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Unable to read '{key}' from {path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as handle:
                handle.write(value)
            tmp_path.replace(path)
        except OSError as exc:
            raise StorageError(f"Unable to write '{key}' to {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Unable to remove '{key}': {exc}") from exc


class InMemoryKeyValueStore:
    """Dict-backed store with an optional size quota, counted in UTF-8 bytes."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def _size_with(self, key: str, value: str) -> int:
        total = len(key.encode("utf-8")) + len(value.encode("utf-8"))
        for other_key, other_value in self._items.items():
            if other_key != key:
                total += len(other_key.encode("utf-8")) + len(other_value.encode("utf-8"))
        return total

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None and self._size_with(key, value) > self.quota_bytes:
            raise StorageQuotaExceeded(f"Writing '{key}' would exceed the {self.quota_bytes} byte quota")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
