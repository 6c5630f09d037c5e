from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ..core.props import normalize_props
from ..core.status import is_error, not_found_status


def _path_id(element_id: str) -> str:
    # Ids are opaque; "/", "?" and "#" must not change which route is hit.
    return quote(str(element_id), safe="")


class InteractablesClient:
    """HTTP client for driving interactables on a running server.

    Contract:
    - POST   /api/interactables                  (JSON)
    - GET    /api/interactables[/{id}]
    - PATCH  /api/interactables/{id}/props       (JSON partial props)
    - DELETE /api/interactables/{id}
    - POST   /api/reset
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000") -> None:
        self.base_url = base_url.rstrip("/")

    def register(
        self,
        name: str,
        *,
        description: str = "",
        component: str | None = None,
        props: Mapping[str, Any] | None = None,
        props_schema: dict[str, Any] | None = None,
        timeout_s: float = 10.0,
    ) -> str:
        """Register an interactable and return its id."""

        import httpx

        body = {
            "name": name,
            "description": description,
            "component": component,
            "props": normalize_props(props),
            "propsSchema": props_schema,
        }
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.post("/api/interactables", json=body)
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to register interactable: {res.status_code} {res.text}")
            data = res.json()
            element_id = str(data.get("id") or "")
            if not element_id:
                raise RuntimeError(f"Register returned invalid response: {data}")
            return element_id

    def update_props(self, element_id: str, partial_props: Mapping[str, Any], *, timeout_s: float = 10.0) -> str:
        """Send a partial props update and return the server's status string.

        Unknown ids come back as the not-found status, not as an exception.
        """

        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.patch(f"/api/interactables/{_path_id(element_id)}/props", json=normalize_props(partial_props))
            if res.status_code == 404:
                try:
                    detail = str(res.json().get("detail"))
                except ValueError:
                    detail = ""
                return detail if is_error(detail) else not_found_status(element_id)
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to update interactable props: {res.status_code} {res.text}")
            return str(res.json().get("status"))

    def get(self, element_id: str, *, timeout_s: float = 10.0) -> dict[str, Any] | None:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(f"/api/interactables/{_path_id(element_id)}")
            if res.status_code == 404:
                return None
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to get interactable: {res.status_code} {res.text}")
            return dict(res.json())

    def list(self, *, timeout_s: float = 10.0) -> list[dict[str, Any]]:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/api/interactables")
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to list interactables: {res.status_code} {res.text}")
            return [dict(item) for item in res.json()]

    def remove(self, element_id: str, *, timeout_s: float = 10.0) -> bool:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.delete(f"/api/interactables/{_path_id(element_id)}")
            if res.status_code == 404:
                return False
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to remove interactable: {res.status_code} {res.text}")
            return True

    def reset(self, *, timeout_s: float = 10.0) -> int:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.post("/api/reset")
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to reset registry: {res.status_code} {res.text}")
            return int(res.json().get("removed", 0))

    def global_revision(self, *, timeout_s: float = 10.0) -> int:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/api/events")
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to poll events: {res.status_code} {res.text}")
            return int(res.json().get("globalRevision", 0))
