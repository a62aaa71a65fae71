from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from upload_relay.config import Settings
from upload_relay.main import create_app
from tests.fakes import InMemoryStorage


@pytest.fixture
def settings(tmp_path):
    static = tmp_path / "public"
    static.mkdir()
    (static / "index.html").write_text("<h1>upload</h1>", encoding="utf-8")
    return Settings(
        static_dir=str(static),
        s3_bucket_name="test-bucket",
        storage_backend="local",
        local_storage_root=str(tmp_path / "store"),
    )


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def app(settings, storage):
    return create_app(settings=settings, storage=storage)


@pytest.fixture
def client(app):
    return TestClient(app)
