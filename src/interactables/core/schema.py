from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import ValidationError

from .props import Props


logger = logging.getLogger(__name__)

SchemaPolicy = Literal["lenient", "strict"]
SCHEMA_POLICIES: tuple[SchemaPolicy, ...] = ("lenient", "strict")


class PropsValidationError(ValueError):
    """Raised under the strict policy when merged props violate an entry's schema."""

    def __init__(self, element_id: str, cause: Exception) -> None:
        self.element_id = element_id
        self.cause = cause
        super().__init__(f"Props for component with ID {element_id} failed schema validation: {cause}")


def parse_schema_policy(value: Any) -> SchemaPolicy:
    v = str(value).strip().lower()
    if v in SCHEMA_POLICIES:
        return v  # type: ignore[return-value]
    raise ValueError(f"Unsupported schema policy {value!r}. Use 'lenient' or 'strict'.")


def validate_props(element_id: str, schema: Any, props: Props) -> None:
    """Check ``props`` against ``schema``.

    Accepts pydantic models (anything exposing `model_validate`) or a plain
    callable that raises on invalid input. Dict schemas (JSON schema received
    over HTTP) are descriptive only and are not checked here.
    """

    if schema is None or isinstance(schema, dict):
        return
    try:
        if hasattr(schema, "model_validate"):
            schema.model_validate(props)
        elif callable(schema):
            schema(props)
        else:
            raise TypeError(f"props_schema of type {type(schema).__name__} cannot validate props")
    except (ValidationError, TypeError, ValueError) as ex:
        logger.info("Rejected props update for %s: %s", element_id, ex)
        raise PropsValidationError(element_id, ex) from ex


def describe_schema(schema: Any) -> dict[str, Any] | None:
    if schema is None:
        return None
    if isinstance(schema, dict):
        return dict(schema)
    json_schema = getattr(schema, "model_json_schema", None)
    if callable(json_schema):
        return dict(json_schema())
    return None
