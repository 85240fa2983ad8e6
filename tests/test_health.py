import socket
import threading
import urllib.error
import urllib.request

import pytest

from mcroutersync.health import create_health_server, start_health_server


@pytest.fixture
def running_server():
    server = create_health_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def _url(server, path):
    host, port = server.server_address[:2]
    return f"http://{host}:{port}{path}"


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_health_returns_ok(running_server):
    with urllib.request.urlopen(_url(running_server, "/health"), timeout=5) as resp:
        assert resp.status == 200
        assert resp.read() == b""


def test_health_accepts_post(running_server):
    req = urllib.request.Request(_url(running_server, "/health"), data=b"", method="POST")
    with urllib.request.urlopen(req, timeout=5) as resp:
        assert resp.status == 200


def test_health_ignores_query_string(running_server):
    with urllib.request.urlopen(_url(running_server, "/health?x=1"), timeout=5) as resp:
        assert resp.status == 200


def test_unknown_path_is_not_found(running_server):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(_url(running_server, "/missing"), timeout=5)
    assert info.value.code == 404
    assert info.value.read() == b"404 page not found\n"
    info.value.close()


def test_start_health_server_stops_on_event():
    port = _free_port()
    stop_event = threading.Event()
    seen = {}

    def _probe_then_stop():
        try:
            for _ in range(50):
                try:
                    with urllib.request.urlopen(
                        f"http://127.0.0.1:{port}/health", timeout=1
                    ) as resp:
                        seen["status"] = resp.status
                    return
                except OSError:
                    threading.Event().wait(0.05)
        finally:
            stop_event.set()

    prober = threading.Thread(target=_probe_then_stop, daemon=True)
    prober.start()

    start_health_server(stop_event, "127.0.0.1", port)
    prober.join(timeout=5)

    assert seen.get("status") == 200
    with pytest.raises(ConnectionRefusedError):
        socket.create_connection(("127.0.0.1", port), timeout=1)


def test_start_health_server_returns_when_already_stopped():
    port = _free_port()
    stop_event = threading.Event()
    stop_event.set()

    start_health_server(stop_event, "127.0.0.1", port)

    with pytest.raises(ConnectionRefusedError):
        socket.create_connection(("127.0.0.1", port), timeout=1)