from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

import numpy as np


PropScalar = Union[str, int, float, bool, None]
PropValue = Union[PropScalar, list["PropValue"], dict[str, "PropValue"]]
Props = dict[str, PropValue]
PropKind = Literal["scalar", "sequence", "mapping"]


def prop_kind(value: PropValue) -> PropKind:
    if isinstance(value, dict):
        return "mapping"
    if isinstance(value, list):
        return "sequence"
    if value is None or isinstance(value, (str, int, float, bool)):
        return "scalar"
    raise TypeError(f"Unsupported prop value type: {type(value).__name__}")


def normalize_value(value: Any, *, path: str = "props") -> PropValue:
    """Return a detached copy of ``value`` restricted to the prop value union.

    Tuples and numpy arrays become lists, numpy scalars become Python scalars.
    Floats must be finite so every stored value stays JSON-encodable.
    """

    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, np.generic):
        return normalize_value(value.item(), path=path)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not np.isfinite(value):
            raise ValueError(f"{path} must be a finite number")
        return float(value)
    if isinstance(value, np.ndarray):
        return normalize_value(value.tolist(), path=path)
    if isinstance(value, Mapping):
        return normalize_props(value, path=path)
    if isinstance(value, (list, tuple)):
        return [normalize_value(v, path=f"{path}[{i}]") for i, v in enumerate(value)]
    raise TypeError(f"{path} has unsupported type {type(value).__name__}")


def normalize_props(props: Mapping[str, Any] | None, *, path: str = "props") -> Props:
    if props is None:
        return {}
    if not isinstance(props, Mapping):
        raise TypeError(f"{path} must be a mapping, got {type(props).__name__}")
    out: Props = {}
    for key, value in props.items():
        if not isinstance(key, str):
            raise TypeError(f"{path} keys must be strings, got {type(key).__name__}")
        out[key] = normalize_value(value, path=f"{path}.{key}")
    return out
