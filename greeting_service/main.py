from __future__ import annotations

import logging

from fastapi import FastAPI

from greeting_service.config import get_settings
from greeting_service.infrastructure.listener import (
    ListenerBindError,
    bind_listener,
    build_server,
    serve,
)
from greeting_service.infrastructure.logging import configure_logging
from greeting_service.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application with the catch-all greeting route."""

    # Documentation routes would shadow the catch-all route.
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    register_routes(app)
    return app


app = create_app()


def run() -> None:
    """Bind the listener and serve until the process is stopped."""

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        sock = bind_listener(settings.host, settings.port)
    except ListenerBindError as exc:
        raise SystemExit(str(exc)) from exc

    logger.info("Starting server on port %s", sock.getsockname()[1])
    serve(build_server(app, settings), sock)
