from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from ...core.registry import InteractableRegistry, RegistryView
from ...core.schema import PropsValidationError
from ...core.status import is_error, is_success
from ..serializers import entry_to_item


def mount_interactables_api(app: FastAPI, registry: InteractableRegistry) -> None:
    """Mount the interactable endpoints backed by ``registry``.

    Reads go through a `RegistryView`; only the register/update/delete/reset
    routes touch the registry itself.
    """

    view = RegistryView(registry)

    @app.get("/api/events")
    def events() -> dict[str, int]:
        # Minimal polling endpoint.
        return {"globalRevision": view.global_revision()}

    @app.get("/api/interactables")
    def list_interactables() -> list[dict[str, Any]]:
        return [entry_to_item(e) for e in view.list()]

    @app.get("/api/interactables/{element_id:path}")
    def get_interactable(element_id: str) -> dict[str, Any]:
        e = view.get(element_id)
        if e is None:
            raise HTTPException(status_code=404, detail=f"Unknown interactable: {element_id}")
        return entry_to_item(e)

    @app.post("/api/interactables")
    def register_interactable(body: dict) -> dict[str, Any]:
        name = str(body.get("name") or "").strip()
        if not name:
            raise HTTPException(status_code=400, detail="Missing name")

        props = body.get("props")
        if props is not None and not isinstance(props, dict):
            raise HTTPException(status_code=400, detail="props must be an object")

        schema = body.get("propsSchema")
        if schema is not None and not isinstance(schema, dict):
            raise HTTPException(status_code=400, detail="propsSchema must be an object")

        component = body.get("component")
        try:
            element_id = registry.add(
                name=name,
                description=str(body.get("description") or ""),
                component=str(component) if component is not None else None,
                props=props,
                props_schema=schema,
            )
        except (TypeError, ValueError) as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return {"ok": True, "id": element_id}

    @app.patch("/api/interactables/{element_id:path}/props")
    def update_interactable_props(element_id: str, body: dict) -> dict[str, Any]:
        try:
            status = registry.update_props(element_id, body)
        except PropsValidationError as ex:
            raise HTTPException(status_code=422, detail=str(ex))
        except (TypeError, ValueError) as ex:
            raise HTTPException(status_code=400, detail=str(ex))

        if is_error(status):
            raise HTTPException(status_code=404, detail=status)
        return {"ok": is_success(status), "status": status}

    @app.delete("/api/interactables/{element_id:path}")
    def delete_interactable(element_id: str) -> dict[str, bool]:
        if not registry.remove(element_id):
            raise HTTPException(status_code=404, detail=f"Unknown interactable: {element_id}")
        return {"ok": True}

    @app.post("/api/reset")
    def reset_registry() -> dict[str, Any]:
        return {"ok": True, "removed": registry.clear()}
