"""Command-line configuration."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Sequence

from .auth import AuthType, InvalidAuthTypeError, get_auth_type

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class ConfigError(ValueError):
    """Raised when the configuration is invalid."""


@dataclass(frozen=True)
class Config:
    """Validated settings for the sync service."""

    mc_router_host: str
    server_list_api: str
    auth_type: AuthType
    auth_token: str
    log_level: int
    sync_interval: float


def resolve_log_level(level: str) -> int:
    """Map a level name to a logging level, defaulting to INFO."""
    return _LOG_LEVELS.get(level, logging.INFO)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mc-router-sync")
    parser.add_argument(
        "--mc-router-host",
        "-mc-router-host",
        default="",
        help="* McRouter API host (e.g. http://localhost:8000)",
    )
    parser.add_argument(
        "--server-list-api",
        "-server-list-api",
        default="",
        help="* Server list API endpoint (e.g. http://localhost:3000/api/servers)",
    )
    parser.add_argument(
        "--auth-type",
        "-auth-type",
        default="none",
        help="Authentication type for the server list API: apikey, none",
    )
    parser.add_argument(
        "--log-level",
        "-log-level",
        default="info",
        help="The lowest level log you would like (e.g. debug)",
    )
    parser.add_argument(
        "--sync-interval",
        "-sync-interval",
        type=int,
        default=30,
        help="Sync interval in seconds",
    )
    return parser


def load_config(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Parse flags and the API_KEY environment variable into a Config."""
    args = _build_parser().parse_args(argv)
    env = os.environ if environ is None else environ
    auth_token = env.get("API_KEY", "")

    if not args.mc_router_host:
        raise ConfigError("McRouterHost is invalid: required")
    if not args.server_list_api:
        raise ConfigError("ServerListAPI is invalid: required")

    try:
        auth_type = get_auth_type(args.auth_type)
    except InvalidAuthTypeError:
        raise ConfigError(
            f"invalid auth-type: {args.auth_type} (must be apikey or none)"
        ) from None

    if auth_type is AuthType.APIKEY and not auth_token:
        raise ConfigError(f"auth-token is required when auth-type is {args.auth_type}")

    return Config(
        mc_router_host=args.mc_router_host,
        server_list_api=args.server_list_api,
        auth_type=auth_type,
        auth_token=auth_token,
        log_level=resolve_log_level(args.log_level),
        sync_interval=float(args.sync_interval),
    )