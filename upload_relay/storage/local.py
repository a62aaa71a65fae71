from __future__ import annotations

from pathlib import Path

from upload_relay.storage.base import StorageError, StoredObject


class LocalStorage:
    """Development backend: one directory per bucket under a local root."""

    def __init__(self, root: str, bucket: str):
        self.base = (Path(root) / (bucket or "default")).resolve()

    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> StoredObject:
        dest = (self.base / key).resolve()
        if dest == self.base or self.base not in dest.parents:
            raise StorageError(f"Key {key!r} resolves outside {self.base}")
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Local write failed for {key!r}: {e}") from e
        return StoredObject(key=key, location=dest.as_uri(), size=len(data))
