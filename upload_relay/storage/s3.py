from __future__ import annotations

import threading
from typing import Any
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from upload_relay.storage.base import StorageError, StoredObject


class S3Storage:
    """
    Writes objects into a single S3 bucket with one PutObject call each.

    The boto3 client is built on first use and then shared; boto3 clients are
    safe to use from several worker threads at the same time. Bad settings
    (region, endpoint) therefore show up as a failed write, not a failed start.
    """

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        endpoint_url: str | None = None,
        client: Any = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
    ):
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url.rstrip("/") if endpoint_url else None
        self._client = client
        self._client_kwargs = {
            "region_name": region,
            "endpoint_url": endpoint_url,
            "aws_access_key_id": aws_access_key_id,
            "aws_secret_access_key": aws_secret_access_key,
        }
        self._lock = threading.Lock()

    @property
    def client(self) -> Any:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = boto3.client("s3", **self._client_kwargs)
        return self._client

    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> StoredObject:
        extra: dict[str, str] = {}
        if content_type:
            extra["ContentType"] = content_type
        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=data, **extra)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"S3 put_object failed for {key!r}: {e}") from e
        except ValueError as e:
            # botocore rejects a malformed endpoint_url with a plain ValueError
            raise StorageError(f"S3 client could not be built: {e}") from e
        return StoredObject(key=key, location=self.location(key), size=len(data))

    def location(self, key: str) -> str:
        path = quote(key, safe="/~")
        if self.endpoint_url:
            return f"{self.endpoint_url}/{self.bucket}/{path}"
        # Region boto3 resolved itself (AWS_DEFAULT_REGION, profile) when none was configured.
        region = self.region or (self._client.meta.region_name if self._client is not None else None)
        if region:
            return f"https://{self.bucket}.s3.{region}.amazonaws.com/{path}"
        return f"https://{self.bucket}.s3.amazonaws.com/{path}"
