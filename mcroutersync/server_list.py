"""HTTP client for the API that lists the desired servers."""

from __future__ import annotations

import requests

from .auth import Auth
from .route import Route, parse_routes


class ServerListError(RuntimeError):
    """Raised when the server list cannot be fetched or parsed."""


class ServerListClient:
    """Fetches the desired routes from the server list endpoint."""

    def __init__(self, endpoint: str, auth: Auth, timeout: float = 15.0) -> None:
        self.endpoint = endpoint
        self.auth = auth
        self.session = requests.Session()
        self.timeout = timeout

    def get_servers(self) -> list[Route]:
        """Return the routes the server list says should exist."""
        try:
            request = requests.Request("GET", self.endpoint).prepare()
        except requests.RequestException as exc:
            raise ServerListError(f"failed to create request: {exc}") from exc
        try:
            self.auth.authenticate_request(request)
        except Exception as exc:
            raise ServerListError(f"failed to authenticate request: {exc}") from exc
        try:
            response = self.session.send(request, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ServerListError(f"failed to fetch server list: {exc}") from exc
        with response:
            if response.status_code != 200:
                raise ServerListError(
                    f"unexpected status code {response.status_code}: {response.text}"
                )
            try:
                return parse_routes(response.content)
            except ValueError as exc:
                raise ServerListError(f"failed to parse server list: {exc}") from exc