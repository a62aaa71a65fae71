from __future__ import annotations

from typing import IO

from upload_relay.schemas import StagedUpload
from upload_relay.storage.base import Storage, StoredObject


SUCCESS_PREFIX = "File uploaded successfully. "
FAILURE_MESSAGE = "Error uploading file"


def read_staged(original_filename: str, fileobj: IO[bytes], content_type: str | None = None) -> StagedUpload:
    # Whole-file buffering: the write below needs the complete payload.
    fileobj.seek(0)
    return StagedUpload(original_filename=original_filename, content=fileobj.read(), content_type=content_type)


def handle_upload(upload: StagedUpload, storage: Storage) -> StoredObject:
    """
    Forward one staged upload to the storage backend.

    The original filename is the object key, unmodified: same-name uploads
    overwrite each other and path-like names (``../secret.txt``) reach the
    backend as-is. Raises StorageError when the write fails.
    """
    return storage.put_object(upload.original_filename, upload.content, upload.content_type)


def success_message(stored: StoredObject) -> str:
    return f"{SUCCESS_PREFIX}{stored.location}"
