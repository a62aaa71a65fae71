from __future__ import annotations

from upload_relay.config import Settings
from upload_relay.storage.base import Storage, StorageError, StoredObject
from upload_relay.storage.local import LocalStorage
from upload_relay.storage.s3 import S3Storage

__all__ = ["Storage", "StorageError", "StoredObject", "LocalStorage", "S3Storage", "build_storage"]


def build_storage(settings: Settings) -> Storage:
    backend = settings.storage_backend.strip().lower()
    if backend == "s3":
        return S3Storage(
            bucket=settings.s3_bucket_name,
            region=settings.aws_region,
            endpoint_url=settings.s3_endpoint_url,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )
    if backend == "local":
        return LocalStorage(settings.local_storage_root, settings.s3_bucket_name)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")
