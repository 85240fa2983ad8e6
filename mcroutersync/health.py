"""A minimal HTTP health endpoint."""

from __future__ import annotations

import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


class _HealthHandler(BaseHTTPRequestHandler):
    """Answers 200 on /health and 404 elsewhere, for any method."""

    def _respond(self) -> None:
        if urlsplit(self.path).path == "/health":
            self.send_response(200)
            self.send_header("Content-Length", "0")
            self.end_headers()
        else:
            self.send_error(404)

    do_GET = do_HEAD = do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = _respond

    def log_message(self, format: str, *args: object) -> None:
        logger.debug(format, *args)


def create_health_server(host: str = "", port: int = 8080) -> ThreadingHTTPServer:
    """Bind a health server to ``host``:``port`` without starting it."""
    server = ThreadingHTTPServer((host, port), _HealthHandler)
    server.daemon_threads = True
    return server


def start_health_server(
    stop_event: threading.Event, host: str = "", port: int = 8080
) -> None:
    """Serve the health endpoint until ``stop_event`` is set."""
    server = create_health_server(host, port)

    def _watch() -> None:
        stop_event.wait()
        logger.info("Shutting down health server...")
        server.shutdown()

    threading.Thread(target=_watch, daemon=True).start()
    logger.info("Starting health server on %s:%d", host, port)
    try:
        server.serve_forever()
    finally:
        server.server_close()