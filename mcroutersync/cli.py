"""Command-line entry point for the sync service."""

from __future__ import annotations

import logging
import signal
import sys
import threading
from typing import Sequence

from .auth import ApiKeyAuth, Auth, AuthType, NoneAuth
from .config import Config, ConfigError, load_config
from .health import start_health_server
from .mc_router import McRouterClient
from .reconciler import Reconciler
from .server_list import ServerListClient

logger = logging.getLogger(__name__)


def configure_logger(level: int) -> None:
    """Send log records at ``level`` and above to standard output."""
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="time=%(asctime)s level=%(levelname)s msg=%(message)s",
        force=True,
    )


def build_auth(config: Config) -> Auth:
    """Choose the authentication scheme the configuration asks for."""
    if config.auth_type is AuthType.APIKEY:
        return ApiKeyAuth(config.auth_token)
    return NoneAuth()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sync service until interrupted."""
    try:
        config = load_config(argv)
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    configure_logger(config.log_level)
    reconciler = Reconciler(
        ServerListClient(config.server_list_api, build_auth(config)),
        McRouterClient(config.mc_router_host),
        config.sync_interval,
    )

    stop_event = threading.Event()
    health_failed = threading.Event()
    previous = {
        sig: signal.signal(sig, lambda signum, frame: stop_event.set())
        for sig in (signal.SIGINT, signal.SIGTERM)
    }

    def _run_health() -> None:
        try:
            start_health_server(stop_event)
        except OSError as exc:
            logger.critical("Health server failed: %s", exc)
            health_failed.set()
            stop_event.set()

    health_thread = threading.Thread(target=_run_health, daemon=True)
    health_thread.start()
    try:
        reconciler.start(stop_event)
    finally:
        stop_event.set()
        health_thread.join(timeout=5)
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    return 1 if health_failed.is_set() else 0


if __name__ == "__main__":
    sys.exit(main())