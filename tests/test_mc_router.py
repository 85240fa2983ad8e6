import json

import pytest
import responses

from mcroutersync.mc_router import McRouterClient, McRouterError
from mcroutersync.route import Route

HOST = "http://router.example.com"


def test_new_client_defaults():
    client = McRouterClient("http://localhost:8080")
    assert client.host == "http://localhost:8080"
    assert client.timeout == 15.0


@pytest.mark.parametrize(
    "routes",
    [
        [
            Route("server1.example.com", "backend1:25565"),
            Route("server2.example.com", "backend2:25565"),
        ],
        [],
    ],
    ids=["successful get routes", "empty routes"],
)
def test_get_routes_success(routes):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{HOST}/routes",
            json=[r.to_dict() for r in routes],
            status=200,
        )
        result = McRouterClient(HOST).get_routes()
        request = rsps.calls[0].request
        assert request.method == "GET"
        assert request.headers["Accept"] == "application/json"
    assert result == routes


def test_get_routes_server_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/routes", body="boom", status=500)
        with pytest.raises(McRouterError, match="unexpected status code 500: boom"):
            McRouterClient(HOST).get_routes()


def test_get_routes_bad_json():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/routes", body="not json", status=200)
        with pytest.raises(McRouterError, match="failed to decode response"):
            McRouterClient(HOST).get_routes()


def test_get_routes_connection_failure():
    with responses.RequestsMock():
        with pytest.raises(McRouterError, match="failed to get routes"):
            McRouterClient(HOST).get_routes()


@pytest.mark.parametrize(
    "route, status",
    [
        (Route("server1.example.com", "backend1:25565"), 200),
        (Route("server2.example.com", "backend2:25565"), 201),
    ],
    ids=["successful registration", "successful registration with 201"],
)
def test_register_route_success(route, status):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{HOST}/routes", status=status)
        McRouterClient(HOST).register_route(route)
        request = rsps.calls[0].request
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        received = json.loads(request.body)
    assert received == {
        "serverAddress": route.server_address,
        "backend": route.backend,
    }


def test_register_route_server_error():
    route = Route("server3.example.com", "backend3:25565")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{HOST}/routes", body="nope", status=500)
        with pytest.raises(McRouterError, match="unexpected status code 500: nope"):
            McRouterClient(HOST).register_route(route)


def test_register_route_connection_failure():
    with responses.RequestsMock():
        with pytest.raises(McRouterError, match="failed to register route"):
            McRouterClient(HOST).register_route(Route("a.example.com", "b:1"))


@pytest.mark.parametrize(
    "address, status",
    [("server1.example.com", 200), ("server2.example.com", 204)],
    ids=["successful deletion", "successful deletion with 204"],
)
def test_delete_route_success(address, status):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.DELETE, f"{HOST}/routes/{address}", status=status)
        McRouterClient(HOST).delete_route(address)
        request = rsps.calls[0].request
        assert request.method == "DELETE"
        assert request.url == f"{HOST}/routes/{address}"


def test_delete_route_not_found():
    address = "nonexistent.example.com"
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.DELETE, f"{HOST}/routes/{address}", body="missing", status=404
        )
        with pytest.raises(McRouterError, match="unexpected status code 404: missing"):
            McRouterClient(HOST).delete_route(address)


def test_delete_route_connection_failure():
    with responses.RequestsMock():
        with pytest.raises(McRouterError, match="failed to delete route"):
            McRouterClient(HOST).delete_route("server1.example.com")