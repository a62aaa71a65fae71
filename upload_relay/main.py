from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from upload_relay.config import Settings, get_settings
from upload_relay.deps import get_storage
from upload_relay.middleware import RequestIdFilter, RequestIdMiddleware
from upload_relay.schemas import HealthResponse
from upload_relay.services.uploads import FAILURE_MESSAGE, handle_upload, read_staged, success_message
from upload_relay.storage import Storage, StorageError, build_storage


log = logging.getLogger("upload_relay")
if not any(isinstance(f, RequestIdFilter) for f in log.filters):
    log.addFilter(RequestIdFilter())


def create_app(settings: Settings | None = None, storage: Storage | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Upload Relay", version="0.1.0")
    app.state.storage = storage if storage is not None else build_storage(settings)
    log.info(
        "app_env=%s storage=%s bucket=%s", settings.app_env, type(app.state.storage).__name__, settings.s3_bucket_name
    )

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse()

    # Sync route: FastAPI runs it in the worker thread pool, so the blocking
    # read and storage write never hold up the event loop.
    @app.post("/upload", response_class=PlainTextResponse)
    def upload(file: UploadFile = File(...), storage: Storage = Depends(get_storage)):
        staged = read_staged(file.filename or "", file.file, file.content_type)
        try:
            stored = handle_upload(staged, storage)
        except StorageError as e:
            log.warning("upload_failed key=%r error=%s", staged.original_filename, e)
            return PlainTextResponse(FAILURE_MESSAGE, status_code=500)

        log.info("upload_stored key=%r size=%s location=%s", stored.key, stored.size, stored.location)
        return PlainTextResponse(success_message(stored))

    # Mounted last: a mount at "/" would otherwise shadow the routes above.
    if Path(settings.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        log.info("static dir %s not found; static serving disabled", settings.static_dir)

    return app
