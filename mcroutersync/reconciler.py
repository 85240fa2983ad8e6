"""Brings the router's routes in line with the server list."""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Protocol

from .route import Route

logger = logging.getLogger(__name__)


class ReconcileError(RuntimeError):
    """Raised when a reconciliation step fails."""


class ServerList(Protocol):
    """Source of the routes that should exist."""

    def get_servers(self) -> list[Route]:
        """Return the desired routes."""


class McRouter(Protocol):
    """Router whose routes are kept in sync."""

    def get_routes(self) -> list[Route]:
        """Return the routes currently registered."""

    def register_route(self, route: Route) -> None:
        """Create or replace a route."""

    def delete_route(self, server_address: str) -> None:
        """Remove the route for a server address."""


@dataclass(frozen=True)
class ReconcilerDiff:
    """The desired and current state of one server address."""

    server_address: str
    desired_backend: str = ""
    current_backend: str = ""
    in_server_list: bool = False
    in_mc_router: bool = False


class ActionType(str, enum.Enum):
    """What to do with a route."""

    ADD = "add"
    DELETE = "delete"


@dataclass(frozen=True)
class Action:
    """A single change to apply to the router."""

    type: ActionType
    server_address: str
    backend: str = ""


@dataclass
class Reconciler:
    """Periodically syncs the router's routes with the server list."""

    server_list_client: ServerList
    mc_router_client: McRouter
    interval: float

    def start(self, stop_event: threading.Event) -> None:
        """Reconcile now and then every ``interval`` seconds until ``stop_event`` is set."""
        self._reconcile_logged()
        while not stop_event.wait(self.interval):
            self._reconcile_logged()
        logger.info("reconciler stopped")

    def _reconcile_logged(self) -> None:
        try:
            self.reconcile()
        except ReconcileError as exc:
            logger.error("reconciliation error: %s", exc)

    def reconcile(self) -> None:
        """Compute the differences and apply the resulting actions."""
        try:
            diffs = self.diff()
        except ReconcileError as exc:
            raise ReconcileError(f"failed to diff: {exc}") from exc
        logger.debug("Reconciling diffs: %s", diffs)

        actions = self.actions(diffs)
        logger.debug("Applying Actions: %s", actions)
        try:
            self.apply(actions)
        except ReconcileError as exc:
            raise ReconcileError(f"failed to apply actions: {exc}") from exc

    def diff(self) -> list[ReconcilerDiff]:
        """Compare the server list with the router, one entry per address."""
        try:
            server_list_routes = self.server_list_client.get_servers()
        except Exception as exc:
            raise ReconcileError(f"failed to get servers: {exc}") from exc

        try:
            mc_router_routes = self.mc_router_client.get_routes()
        except Exception as exc:
            raise ReconcileError(f"failed to get routes: {exc}") from exc

        desired = {route.server_address: route.backend for route in server_list_routes or ()}
        current = {route.server_address: route.backend for route in mc_router_routes or ()}

        addresses = dict.fromkeys([*desired, *current])
        return [
            ReconcilerDiff(
                server_address=address,
                desired_backend=desired.get(address, ""),
                current_backend=current.get(address, ""),
                in_server_list=address in desired,
                in_mc_router=address in current,
            )
            for address in addresses
        ]

    def actions(self, diffs: Iterable[ReconcilerDiff]) -> list[Action]:
        """Turn differences into add and delete actions."""
        result: list[Action] = []
        for diff in diffs:
            if diff.in_server_list and (
                not diff.in_mc_router or diff.desired_backend != diff.current_backend
            ):
                result.append(
                    Action(ActionType.ADD, diff.server_address, diff.desired_backend)
                )
            elif not diff.in_server_list and diff.in_mc_router:
                result.append(Action(ActionType.DELETE, diff.server_address))
        return result

    def apply(self, actions: Iterable[Action]) -> None:
        """Apply actions in order, stopping at the first failure."""
        for action in actions:
            if action.type is ActionType.ADD:
                route = Route(server_address=action.server_address, backend=action.backend)
                try:
                    self.mc_router_client.register_route(route)
                except Exception as exc:
                    raise ReconcileError(
                        f"failed to register route {action.server_address}: {exc}"
                    ) from exc
            elif action.type is ActionType.DELETE:
                try:
                    self.mc_router_client.delete_route(action.server_address)
                except Exception as exc:
                    raise ReconcileError(
                        f"failed to delete route {action.server_address}: {exc}"
                    ) from exc