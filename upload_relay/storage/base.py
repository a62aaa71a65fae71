from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class StorageError(RuntimeError):
    """Raised by a backend when an object could not be written."""


@dataclass(frozen=True)
class StoredObject:
    key: str
    location: str
    size: int


class Storage(Protocol):
    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> StoredObject: ...
