from __future__ import annotations

from fastapi import Request

from upload_relay.storage.base import Storage


def get_storage(request: Request) -> Storage:
    return request.app.state.storage
