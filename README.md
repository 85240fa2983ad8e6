# mcroutersync

`mcroutersync` keeps the routing table of an mc-router instance in step with
a server list served by your own HTTP API.

On start and then at a fixed interval it fetches the desired routes from the
server list API, fetches the current routes from mc-router, and then:

- registers routes that are missing from mc-router,
- re-registers routes whose backend has changed,
- deletes routes that are no longer in the server list.

Actions are applied in order and a pass stops at the first failure. A failed
pass is logged and the next one runs at the following interval.

While the service runs, a small health server listens on port 8080 on all
interfaces. It answers `/health` with status 200 and an empty body, and any
other path with 404.

## Installation

```sh
pip install .
```

## Running

```sh
mc-router-sync \
  --mc-router-host http://localhost:8000 \
  --server-list-api http://localhost:3000/api/servers
```

Options (each may also be written with a single dash, e.g. `-sync-interval`):

| Option              | Default | Meaning                                              |
|---------------------|---------|------------------------------------------------------|
| `--mc-router-host`  | —       | mc-router API host (required)                        |
| `--server-list-api` | —       | Server list API endpoint (required)                  |
| `--auth-type`       | `none`  | Authentication for the server list: `apikey`, `none` |
| `--log-level`       | `info`  | Lowest log level: `debug`, `info`, `warn`, `error`; anything else means `info` |
| `--sync-interval`   | `30`    | Sync interval in whole seconds                       |

With `--auth-type apikey`, the key is read from the `API_KEY` environment
variable and sent to the server list API as `Authorization: Bearer <key>`.
The variable must then be set and non-empty:

```sh
API_KEY=token mc-router-sync --auth-type apikey \
  --mc-router-host http://localhost:8000 \
  --server-list-api http://localhost:3000/api/servers
```

Logs go to standard output as `time=... level=... msg=...` lines.

If the configuration is invalid, the command prints
`Invalid configuration: <reason>` to standard error and exits with status 1.
The service stops cleanly on SIGINT or SIGTERM and exits with status 0; if the
health server cannot start (for example, port 8080 is taken), the failure is
logged, the service stops, and the exit status is 1.

## Server list format

The server list API must answer `GET` with status 200 and a JSON array
(`null` is read as an empty list):

```json
[
  {"serverAddress": "server1.example.com", "backend": "backend1:25565"}
]
```

mc-router is reached at `GET /routes` (status 200 expected), `POST /routes`
(200 or 201) and `DELETE /routes/<serverAddress>` (200 or 204). HTTP requests
time out after 15 seconds.

## Using it as a library

```python
import threading

from mcroutersync.auth import ApiKeyAuth
from mcroutersync.mc_router import McRouterClient
from mcroutersync.reconciler import Reconciler
from mcroutersync.server_list import ServerListClient

server_list = ServerListClient("http://localhost:3000/api/servers", ApiKeyAuth("token"))
router = McRouterClient("http://localhost:8000")
reconciler = Reconciler(server_list, router, 30)

reconciler.reconcile()              # one pass; raises ReconcileError on failure

stop = threading.Event()
reconciler.start(stop)              # loops until stop.set() is called
```

The pieces of a pass are available on their own:

- `Reconciler.diff()` returns one `ReconcilerDiff` per server address seen on
  either side.
- `Reconciler.actions(diffs)` turns those into `Action` objects of type
  `ActionType.ADD` or `ActionType.DELETE`.
- `Reconciler.apply(actions)` carries them out against mc-router.

Other parts:

- `mcroutersync.route`: the `Route` dataclass (`to_dict`, `to_json`,
  `from_dict`) and `parse_routes` for JSON arrays of routes.
- `mcroutersync.auth`: `ApiKeyAuth`, `NoneAuth`, the `AuthType` enum and
  `get_auth_type`, which raises `InvalidAuthTypeError` for unknown names.
- `mcroutersync.config`: `load_config(argv, environ)` returns a `Config` or
  raises `ConfigError`; `resolve_log_level` maps level names to `logging` levels.
- `mcroutersync.health`: `create_health_server(host, port)` binds the health
  server without starting it; `start_health_server(stop_event, host, port)`
  serves until the event is set.
- Client failures raise `McRouterError` and `ServerListError`.

## Tests

```sh
pip install ".[test]"
pytest
```