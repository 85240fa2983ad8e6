"""HTTP client for the router's route management API."""

from __future__ import annotations

import requests

from .route import Route, parse_routes

DEFAULT_TIMEOUT = 15.0


class McRouterError(RuntimeError):
    """Raised when a call to the router API fails."""


def _unexpected_status(response: requests.Response) -> McRouterError:
    return McRouterError(
        f"unexpected status code {response.status_code}: {response.text}"
    )


class McRouterClient:
    """Reads, registers and deletes routes on a router instance."""

    def __init__(
        self,
        host: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.host = host
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def get_routes(self) -> list[Route]:
        """Return the routes currently registered on the router."""
        try:
            response = self.session.get(
                f"{self.host}/routes",
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise McRouterError(f"failed to get routes: {exc}") from exc

        with response:
            if response.status_code != 200:
                raise _unexpected_status(response)
            try:
                return parse_routes(response.content)
            except ValueError as exc:
                raise McRouterError(f"failed to decode response: {exc}") from exc

    def register_route(self, route: Route) -> None:
        """Create or replace the route for ``route.server_address``."""
        try:
            response = self.session.post(
                f"{self.host}/routes",
                data=route.to_json().encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise McRouterError(f"failed to register route: {exc}") from exc

        with response:
            if response.status_code not in (200, 201):
                raise _unexpected_status(response)

    def delete_route(self, server_address: str) -> None:
        """Remove the route for ``server_address``."""
        try:
            response = self.session.delete(
                f"{self.host}/routes/{server_address}",
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise McRouterError(f"failed to delete route: {exc}") from exc

        with response:
            if response.status_code not in (200, 204):
                raise _unexpected_status(response)