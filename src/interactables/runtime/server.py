from __future__ import annotations

import logging
import socket
import threading
import time
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import uvicorn

from ..api import create_api_app
from ..core.entries import InteractableEntry
from ..core.registry import InteractableRegistry
from ..core.schema import SchemaPolicy
from ..core.settings import RegistrySettings, normalize_base_url
from ..sdk.client import InteractablesClient


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteractablesServer:
    """A running in-process server and the registry it owns.

    The server lives for one session: `close()` (or leaving a ``with`` block)
    stops uvicorn and waits for its thread.
    """

    host: str
    port: int
    url: str
    registry: InteractableRegistry = field(default_factory=InteractableRegistry, repr=False)
    _server: uvicorn.Server | None = field(default=None, repr=False, compare=False)
    _thread: threading.Thread | None = field(default=None, repr=False, compare=False)

    def as_client(self) -> InteractablesClient:
        return InteractablesClient(self.url.rstrip("/"))

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def close(self, *, timeout_s: float = 5.0) -> None:
        if self._server is None or self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout=timeout_s)
        if self._thread.is_alive():
            raise RuntimeError(f"interactables server at {self.url} did not stop within {timeout_s}s")
        logger.info("Stopped interactables server at %s", self.url)

    def __enter__(self) -> "InteractablesServer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def register(
        self,
        name: str,
        *,
        description: str = "",
        component: Any = None,
        props: Mapping[str, Any] | None = None,
        props_schema: Any = None,
    ) -> str:
        """Register an interactable directly in this server's registry."""

        return self.registry.add(
            name=name,
            description=description,
            component=component,
            props=props,
            props_schema=props_schema,
        )

    def update_props(self, element_id: str, partial_props: Mapping[str, Any]) -> str:
        return self.registry.update_props(element_id, partial_props)

    def get(self, element_id: str) -> InteractableEntry | None:
        return self.registry.get(element_id)

    def remove(self, element_id: str) -> bool:
        return self.registry.remove(element_id)

    def list(self) -> Iterator[InteractableEntry]:
        return self.registry.list()


def _unused_port(host: str) -> int:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host, 0))
        return int(sock.getsockname()[1])
    finally:
        sock.close()


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort check that an interactables server is reachable."""

    import httpx

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            data = r.json()
            return bool(data.get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def _wait_until_alive(base_url: str, *, timeout_s: float) -> bool:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if _is_server_alive(base_url):
            return True
        time.sleep(0.02)
    return False


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 5.0,
    schema_policy: SchemaPolicy | None = None,
) -> InteractablesServer | InteractablesClient:
    """Start an interactables server with a single Python call.

    Behavior:
    - If INTERACTABLES_URL is set, we *attach* to that existing server (client mode)
      unless `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      we attach to it (client mode) unless `new_server=True`.
    - Otherwise we start a new local server owning a fresh registry and return an
      `InteractablesServer`. Call its `close()` when the session ends.

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - An explicit `schema_policy` wins over INTERACTABLES_SCHEMA_POLICY, which is
      then never parsed.
    - Uvicorn's per-request access log is off by default because renderers poll
      `/api/events` frequently.
    """

    settings = RegistrySettings.from_env()

    # 1) Try attaching to an explicitly provided server.
    if settings.url and not new_server:
        if _is_server_alive(settings.url, timeout_s=connect_timeout_s):
            logger.info("Attaching to interactables server at %s", settings.url)
            return InteractablesClient(settings.url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = normalize_base_url(f"{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to interactables server at %s", default_url)
            return InteractablesClient(default_url)

    # 3) Start a fresh server.
    registry = InteractableRegistry(schema_policy=settings.resolved_schema_policy(schema_policy))
    app = create_api_app(registry, cors_origins=settings.cors_origins)

    if port == 0:
        port = _unused_port(host)

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level or settings.log_level,
        access_log=access_log,
    )
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    url = f"http://{host}:{port}/"
    if not _wait_until_alive(url.rstrip("/"), timeout_s=startup_timeout_s):
        server.should_exit = True
        raise RuntimeError(f"interactables server did not start at {url} within {startup_timeout_s}s")
    logger.info("Started interactables server at %s (schema policy: %s)", url, registry.schema_policy)

    return InteractablesServer(host=host, port=port, url=url, registry=registry, _server=server, _thread=thread)
