"""HTTP listener: owns the server socket and runs the ASGI server on it."""

from __future__ import annotations

import logging
import socket

import uvicorn
from fastapi import FastAPI

from greeting_service.config import Settings

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 2048


class ListenerBindError(RuntimeError):
    """Raised when the listener cannot acquire its host and port."""

    def __init__(self, host: str, port: int, reason: OSError) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Cannot listen on {host}:{port}: {reason.strerror or reason}")


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``, returning the open server socket.

    There is no retry and no fallback port; any ``OSError`` becomes a
    :class:`ListenerBindError`.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except OSError as exc:
        sock.close()
        logger.error("Unable to bind %s:%s (%s)", host, port, exc)
        raise ListenerBindError(host, port, exc) from exc

    return sock


def build_server(app: FastAPI, settings: Settings) -> uvicorn.Server:
    """Create the uvicorn server that will serve ``app``.

    ``log_config=None`` keeps uvicorn from replacing the process logging
    configuration.
    """

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


def serve(server: uvicorn.Server, sock: socket.socket) -> None:
    """Serve connections on the pre-bound ``sock`` until the process stops."""

    server.run(sockets=[sock])
