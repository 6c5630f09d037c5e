from __future__ import annotations

from typing import Any

from ..core.entries import InteractableEntry
from ..core.props import prop_kind
from ..core.schema import describe_schema


def component_label(component: Any) -> str | None:
    if component is None:
        return None
    if isinstance(component, str):
        return component
    return str(getattr(component, "__qualname__", None) or getattr(component, "__name__", None) or type(component).__name__)


def entry_to_item(e: InteractableEntry) -> dict[str, Any]:
    return {
        "id": e.id,
        "name": e.name,
        "description": e.description,
        "component": component_label(e.component),
        "props": e.props,
        "propKinds": {key: prop_kind(value) for key, value in e.props.items()},
        "propsSchema": describe_schema(e.props_schema),
        "revision": int(e.revision),
        "createdAt": float(e.created_at),
        "updatedAt": float(e.updated_at),
    }
