"""Routes as exchanged with the router and the server list API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Route:
    """A mapping from a public server address to a backend."""

    server_address: str
    backend: str

    def to_dict(self) -> dict[str, str]:
        """Return the route in its JSON wire shape."""
        return {"serverAddress": self.server_address, "backend": self.backend}

    def to_json(self) -> str:
        """Serialise the route as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Route":
        """Build a route from its JSON wire shape; absent fields become empty."""
        if not isinstance(data, Mapping):
            raise ValueError("route must be a JSON object")
        fields = {key: data.get(key) or "" for key in ("serverAddress", "backend")}
        if not all(isinstance(value, str) for value in fields.values()):
            raise ValueError("route fields must be strings")
        return cls(fields["serverAddress"], fields["backend"])


def parse_routes(text: str | bytes) -> list[Route]:
    """Decode a JSON array of routes; a JSON null yields an empty list."""
    data = json.loads(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of routes")
    return [Route.from_dict(item) for item in data]