from __future__ import annotations

from .entries import InteractableEntry
from .ids import IdGenerator, slugify
from .props import PropKind, PropValue, Props, normalize_props, normalize_value, prop_kind
from .registry import InteractableRegistry, RegistryView, shallow_merge
from .schema import PropsValidationError, SchemaPolicy, describe_schema, parse_schema_policy, validate_props
from .settings import RegistrySettings, configure_logging
from .status import (
    UPDATED_SUCCESSFULLY,
    is_error,
    is_success,
    is_warning,
    no_props_status,
    not_found_status,
)

__all__ = [
    "InteractableEntry",
    "IdGenerator",
    "slugify",
    "PropKind",
    "PropValue",
    "Props",
    "normalize_props",
    "normalize_value",
    "prop_kind",
    "InteractableRegistry",
    "RegistryView",
    "shallow_merge",
    "PropsValidationError",
    "SchemaPolicy",
    "describe_schema",
    "parse_schema_policy",
    "validate_props",
    "RegistrySettings",
    "configure_logging",
    "UPDATED_SUCCESSFULLY",
    "is_error",
    "is_success",
    "is_warning",
    "no_props_status",
    "not_found_status",
]
