from __future__ import annotations

import logging

import uvicorn

from upload_relay.config import get_settings
from upload_relay.middleware import configure_logging


def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logging.getLogger("upload_relay").info("App running at http://localhost:%s", settings.port)
    uvicorn.run("upload_relay.main:create_app", factory=True, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
