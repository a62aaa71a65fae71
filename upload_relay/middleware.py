from __future__ import annotations

import contextvars
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")

access_log = logging.getLogger("upload_relay.access")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        rid = request_id_var.get()
        record.request_id = rid if rid else "-"
        return True


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tags the request with an id (caller's x-request-id if sent) and logs one access line."""

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        token = request_id_var.set(rid)
        t0 = time.perf_counter()
        try:
            response: Response = await call_next(request)
            access_log.info(
                "%s %s status=%s duration_ms=%s content_length=%s",
                request.method,
                request.url.path,
                response.status_code,
                int((time.perf_counter() - t0) * 1000),
                request.headers.get("content-length", "-"),
            )
        finally:
            request_id_var.reset(token)
        response.headers["x-request-id"] = rid
        return response


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s",
    )
    # The format needs request_id on every record, whichever logger emitted it.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())
